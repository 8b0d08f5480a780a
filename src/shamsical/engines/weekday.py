from __future__ import annotations

from ..core.errors import OutOfRangeError
from ..core.time import to_jdn
from ..core.types import Weekday
from .converter import solar_hijri_to_gregorian

# Gregorian weekday index (0 = Sunday) -> Solar Hijri index (0 = Saturday)
SOLAR_HIJRI_WEEK_ORDER = (1, 2, 3, 4, 5, 6, 0)

SOLAR_HIJRI_WEEKDAY_NAMES = (
    "Saturday", "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday",
)


def weekday_of(gy: int, gm: int, gd: int) -> Weekday:
    """Weekday of a proleptic Gregorian date; JDN 0 is a Monday."""
    return Weekday((to_jdn(gy, gm, gd) + 1) % 7)


def to_solar_hijri_week_ordering(index: int) -> int:
    if not 0 <= index <= 6:
        raise OutOfRangeError(f"Weekday index must be in 0..6, got {index}")
    return SOLAR_HIJRI_WEEK_ORDER[index]


def solar_hijri_weekday(jy: int, jm: int, jd: int) -> int:
    """Column of a Solar Hijri date in a Saturday-first week."""
    return to_solar_hijri_week_ordering(weekday_of(*solar_hijri_to_gregorian(jy, jm, jd)))


def first_weekday_of_solar_hijri_month(jy: int, jm: int) -> int:
    return solar_hijri_weekday(jy, jm, 1)


def first_weekday_of_gregorian_month(gy: int, gm: int) -> Weekday:
    return weekday_of(gy, gm, 1)


def is_friday(gy: int, gm: int, gd: int) -> bool:
    return weekday_of(gy, gm, gd) == Weekday.FRIDAY


def is_gregorian_weekend(gy: int, gm: int, gd: int) -> bool:
    return weekday_of(gy, gm, gd) in (Weekday.SATURDAY, Weekday.SUNDAY)


def weekday_name(gy: int, gm: int, gd: int) -> str:
    return SOLAR_HIJRI_WEEKDAY_NAMES[to_solar_hijri_week_ordering(weekday_of(gy, gm, gd))]
