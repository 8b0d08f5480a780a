"""shamsical public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .engines.leap import is_gregorian_leap, is_solar_hijri_leap
from .engines.month_length import gregorian_month_length, solar_hijri_month_length
from .engines.converter import convert, gregorian_to_solar_hijri, nowruz, solar_hijri_to_gregorian
from .engines.weekday import to_solar_hijri_week_ordering, weekday_name, weekday_of
from .core.types import GREGORIAN, SOLAR_HIJRI, CalendarDate, Weekday
from .core.errors import HolidayFetchError, InvalidDateError, OutOfRangeError, ShamsiCalError

__all__ = [
    "gregorian_to_solar_hijri",
    "solar_hijri_to_gregorian",
    "convert",
    "nowruz",
    "is_solar_hijri_leap",
    "is_gregorian_leap",
    "solar_hijri_month_length",
    "gregorian_month_length",
    "weekday_of",
    "to_solar_hijri_week_ordering",
    "weekday_name",
    "CalendarDate",
    "Weekday",
    "GREGORIAN",
    "SOLAR_HIJRI",
    "ShamsiCalError",
    "OutOfRangeError",
    "InvalidDateError",
    "HolidayFetchError",
]
