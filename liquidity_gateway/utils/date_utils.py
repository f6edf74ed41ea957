"""Date manipulation utilities"""

from datetime import datetime, timezone
from dateutil.relativedelta import relativedelta

TURKISH_MONTH_NAMES = (
    "Ocak",
    "Şubat",
    "Mart",
    "Nisan",
    "Mayıs",
    "Haziran",
    "Temmuz",
    "Ağustos",
    "Eylül",
    "Ekim",
    "Kasım",
    "Aralık",
)


def utc_now() -> datetime:
    """Current UTC time as a naive datetime (matches how the ledger stores timestamps)"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def add_months(from_date: datetime, months: int) -> datetime:
    """Shift by calendar months, clamping the day to the target month's length"""
    return from_date + relativedelta(months=months)


def month_label(value: datetime) -> str:
    """Human month label in the product's locale, e.g. 'Ekim 2026'"""
    return f"{TURKISH_MONTH_NAMES[value.month - 1]} {value.year}"
