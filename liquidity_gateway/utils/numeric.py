"""Amount coercion helpers"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterable

from liquidity_gateway.domain.exceptions import InvalidLedgerDataError
from liquidity_gateway.domain.models import Amount


def to_float(value: Amount | None) -> float:
    """
    Coerce a ledger amount to float.

    Accepts floats, ints, Decimals and numeric strings ("1500.50").
    None counts as zero. Anything else is a malformed record.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        raise InvalidLedgerDataError(f"Invalid amount: {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(Decimal(str(value).strip()))
    except (InvalidOperation, ValueError) as e:
        raise InvalidLedgerDataError(f"Invalid amount: {value!r}") from e


def sum_amounts(values: Iterable[Amount | None]) -> float:
    """Face-value sum of amounts (no currency conversion)"""
    return sum((to_float(v) for v in values), 0.0)


def clamp_horizon(months: int | float) -> int:
    """Projection horizons below one month are raised to one; fractions are truncated"""
    return max(1, int(months))


def round_half_up(value: float, places: int = 0) -> float:
    """Round with halves away from zero (round() would pick the even neighbour)"""
    exponent = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP))
