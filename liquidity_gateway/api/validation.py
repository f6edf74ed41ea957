"""Input validation for dashboard endpoints (runs before the projection engine)"""

import re
from liquidity_gateway.config import settings
from liquidity_gateway.domain.exceptions import ValidationError

MAX_USER_ID_LENGTH = 100

_FORBIDDEN_CHARACTERS = re.compile(r"[;<>'\"\\]")
_FORBIDDEN_KEYWORDS = ("select", "drop", "delete", "insert", "update", "union", "--", "/*")


def validate_user_id(user_id: str | None) -> str:
    """
    Reject empty, oversized or injection-looking user identifiers.

    Raises:
        ValidationError: with a machine-readable code and field="userId"
    """
    if user_id is None:
        raise ValidationError("User ID is required", "MISSING_USER_ID", "userId")

    if not isinstance(user_id, str):
        raise ValidationError("User ID must be a string", "INVALID_TYPE", "userId")

    if not user_id.strip():
        raise ValidationError("User ID cannot be empty", "EMPTY_USER_ID", "userId")

    if len(user_id) > MAX_USER_ID_LENGTH:
        raise ValidationError(
            f"User ID is too long (max {MAX_USER_ID_LENGTH} characters)", "USER_ID_TOO_LONG", "userId"
        )

    if _FORBIDDEN_CHARACTERS.search(user_id):
        raise ValidationError("User ID contains invalid characters", "INVALID_CHARACTERS", "userId")

    lowered = user_id.lower()
    if any(keyword in lowered for keyword in _FORBIDDEN_KEYWORDS):
        raise ValidationError("User ID contains prohibited keywords", "PROHIBITED_CONTENT", "userId")

    return user_id


def validate_months(months: int | None) -> int:
    """Horizon must be a whole number of months within [1, max_horizon_months]"""
    if months is None:
        raise ValidationError("Months parameter is required", "MISSING_MONTHS", "months")

    if isinstance(months, bool) or not isinstance(months, int):
        raise ValidationError("Months must be an integer", "INVALID_TYPE", "months")

    if months < 1:
        raise ValidationError("Months must be at least 1", "MONTHS_TOO_SMALL", "months")

    if months > settings.max_horizon_months:
        raise ValidationError(
            f"Months cannot exceed {settings.max_horizon_months}", "MONTHS_TOO_LARGE", "months"
        )

    return months
