from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Literal

CalendarKind = Literal["gregorian", "solar_hijri"]

GREGORIAN: CalendarKind = "gregorian"
SOLAR_HIJRI: CalendarKind = "solar_hijri"


def holiday_key(year: int, month: int, day: int) -> str:
    """Holiday lookup key, e.g. '1403-01-01'."""
    return f"{year}-{month:02d}-{day:02d}"


class Weekday(IntEnum):
    """Gregorian weekday index (0 = Sunday)."""
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


@dataclass(frozen=True)
class CalendarDate:
    """A (year, month, day) triple tagged with its calendar.

    The plain constructor does not check anything; use ``validated`` for
    user-supplied values. Conversion functions assume a valid date.
    """
    calendar: CalendarKind
    year: int
    month: int
    day: int

    @classmethod
    def validated(cls, calendar: CalendarKind, year: int, month: int, day: int) -> "CalendarDate":
        from ..engines.month_length import month_length
        from .errors import InvalidDateError

        if calendar not in (GREGORIAN, SOLAR_HIJRI):
            raise InvalidDateError(f"Unknown calendar '{calendar}'")
        if year < 1:
            raise InvalidDateError(f"Year must be >= 1, got {year}")
        if not 1 <= month <= 12:
            raise InvalidDateError(f"Month must be in 1..12, got {month}")
        n = month_length(calendar, year, month)
        if not 1 <= day <= n:
            raise InvalidDateError(f"Day must be in 1..{n} for {year}-{month:02d}, got {day}")
        return cls(calendar, year, month, day)

    def ymd(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def key(self) -> str:
        return holiday_key(self.year, self.month, self.day)

    def convert(self) -> "CalendarDate":
        from ..engines.converter import convert
        return convert(self)
