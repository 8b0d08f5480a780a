"""Gregorian <-> Solar Hijri day-count transform.

Both directions turn the source date into a day count from a fixed epoch and
decompose that count in the target calendar:

  Gregorian -> Solar Hijri peels 33-year blocks (12053 days), 4-year blocks
  (1461 days) and the final year, whose first 186 days are months 1..6.

  Solar Hijri -> Gregorian peels 400-year blocks (146097 days), centuries
  (36524 days, plus one for the leap century start), 4-year blocks and the
  final year, then walks the Gregorian month table.

Inputs are not validated. The functions are defined for year >= 1,
month in 1..12 and a day that exists in that month; anything else gives an
unspecified (but non-raising) result.
"""
from __future__ import annotations

from typing import Tuple

from ..core.types import GREGORIAN, SOLAR_HIJRI, CalendarDate
from .leap import is_gregorian_leap
from .month_length import GREGORIAN_MONTH_DAYS

Ymd = Tuple[int, int, int]

# Gregorian 1600 and Solar Hijri 979 both start a grand-cycle block of the
# day count. Floor division keeps the rebasing exact for earlier years too.
GREGORIAN_EPOCH_YEAR = 1600
SOLAR_HIJRI_EPOCH_YEAR = 979

# Day-of-year offset of each Gregorian month start in a common year.
GREGORIAN_MONTH_STARTS = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

DAYS_PER_33_YEARS = 12053
DAYS_PER_4_YEARS = 1461
DAYS_PER_400_YEARS = 146097
DAYS_PER_CENTURY = 36524
FIRST_HALF_DAYS = 186  # Farvardin..Shahrivar, 6 x 31

SOLAR_HIJRI_YEAR_SHIFT = 1595
SOLAR_HIJRI_DAY_SHIFT = -355668


def _gregorian_day_count(y: int, m: int, d: int) -> int:
    # Feb 29 of year y only counts once March has started.
    y2 = y + 1 if m > 2 else y
    return (
        365 * y
        + (y2 + 3) // 4
        - (y2 + 99) // 100
        + (y2 + 399) // 400
        - 80
        + d
        + GREGORIAN_MONTH_STARTS[m - 1]
    )


def gregorian_to_solar_hijri(gy: int, gm: int, gd: int) -> Ymd:
    days = _gregorian_day_count(gy - GREGORIAN_EPOCH_YEAR, gm, gd)

    jy = SOLAR_HIJRI_EPOCH_YEAR + 33 * (days // DAYS_PER_33_YEARS)
    days %= DAYS_PER_33_YEARS

    jy += 4 * (days // DAYS_PER_4_YEARS)
    days %= DAYS_PER_4_YEARS

    # the first year of each 4-year block has 366 days
    if days > 365:
        jy += (days - 1) // 365
        days = (days - 1) % 365

    if days < FIRST_HALF_DAYS:
        jm = 1 + days // 31
        jd = 1 + days % 31
    else:
        jm = 7 + (days - FIRST_HALF_DAYS) // 30
        jd = 1 + (days - FIRST_HALF_DAYS) % 30
    return jy, jm, jd


def _solar_hijri_day_count(jy: int, jm: int, jd: int) -> int:
    y = jy + SOLAR_HIJRI_YEAR_SHIFT
    days = SOLAR_HIJRI_DAY_SHIFT + 365 * y + (y // 33) * 8 + ((y % 33) + 3) // 4 + jd
    if jm < 7:
        days += (jm - 1) * 31
    else:
        days += FIRST_HALF_DAYS + (jm - 7) * 30
    return days


def solar_hijri_to_gregorian(jy: int, jm: int, jd: int) -> Ymd:
    days = _solar_hijri_day_count(jy, jm, jd)

    gy = 400 * (days // DAYS_PER_400_YEARS)
    days %= DAYS_PER_400_YEARS

    if days > DAYS_PER_CENTURY:
        # first century of the block is one day longer (its year 0 is leap)
        days -= 1
        gy += 100 * (days // DAYS_PER_CENTURY)
        days %= DAYS_PER_CENTURY
        if days >= 365:
            days += 1

    gy += 4 * (days // DAYS_PER_4_YEARS)
    days %= DAYS_PER_4_YEARS

    if days > 365:
        gy += (days - 1) // 365
        days = (days - 1) % 365

    leap = is_gregorian_leap(gy)
    gd = days + 1
    gm = 1
    for n in GREGORIAN_MONTH_DAYS:
        if gm == 2 and leap:
            n += 1
        if gd <= n or gm == 12:
            break
        gd -= n
        gm += 1
    return gy, gm, gd


def convert(date: CalendarDate) -> CalendarDate:
    """Return `date` expressed in the other calendar."""
    if date.calendar == GREGORIAN:
        return CalendarDate(SOLAR_HIJRI, *gregorian_to_solar_hijri(*date.ymd()))
    if date.calendar == SOLAR_HIJRI:
        return CalendarDate(GREGORIAN, *solar_hijri_to_gregorian(*date.ymd()))
    raise ValueError(f"Unknown calendar '{date.calendar}'")


def nowruz(jy: int) -> Ymd:
    """Gregorian date of 1 Farvardin of Solar Hijri year `jy`."""
    return solar_hijri_to_gregorian(jy, 1, 1)
