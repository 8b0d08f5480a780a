from __future__ import annotations

from ..core.errors import OutOfRangeError
from ..core.types import GREGORIAN, SOLAR_HIJRI, CalendarKind
from .leap import is_gregorian_leap, is_solar_hijri_leap

GREGORIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise OutOfRangeError(f"Month must be in 1..12, got {month}")


def solar_hijri_month_length(year: int, month: int) -> int:
    """Farvardin..Shahrivar have 31 days, Mehr..Bahman 30, Esfand 29 or 30."""
    _check_month(month)
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_solar_hijri_leap(year) else 29


def gregorian_month_length(year: int, month: int) -> int:
    _check_month(month)
    if month == 2 and is_gregorian_leap(year):
        return 29
    return GREGORIAN_MONTH_DAYS[month - 1]


def month_length(calendar: CalendarKind, year: int, month: int) -> int:
    if calendar == SOLAR_HIJRI:
        return solar_hijri_month_length(year, month)
    if calendar == GREGORIAN:
        return gregorian_month_length(year, month)
    raise ValueError(f"Unknown calendar '{calendar}'")


def year_length(calendar: CalendarKind, year: int) -> int:
    return sum(month_length(calendar, year, m) for m in range(1, 13))
