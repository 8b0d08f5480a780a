# tests/test_converter.py

import pytest
import random
from datetime import date, timedelta

from shamsical import CalendarDate, GREGORIAN, SOLAR_HIJRI, InvalidDateError
from shamsical.engines.converter import (
    convert,
    gregorian_to_solar_hijri,
    nowruz,
    solar_hijri_to_gregorian,
)
from shamsical.engines.leap import is_solar_hijri_leap
from shamsical.engines.month_length import solar_hijri_month_length

KNOWN = [
    # (gregorian, solar hijri)
    ((2024, 3, 20), (1403, 1, 1)),
    ((2024, 3, 19), (1402, 12, 29)),
    ((2025, 3, 20), (1403, 12, 30)),
    ((2025, 3, 21), (1404, 1, 1)),
    ((2024, 1, 1), (1402, 10, 11)),
    ((2000, 1, 1), (1378, 10, 11)),
    ((1979, 2, 11), (1357, 11, 22)),
]

@pytest.mark.parametrize("g, sh", KNOWN)
def test_known_conversions(g, sh):
    assert gregorian_to_solar_hijri(*g) == sh
    assert solar_hijri_to_gregorian(*sh) == g

def test_nowruz_1403():
    assert nowruz(1403) == (2024, 3, 20)

def test_gregorian_round_trip_and_monotonicity():
    """Every Gregorian day of 1000..3000 survives the round trip, with no skipped or repeated Solar Hijri days."""
    d = date(1000, 1, 1)
    end = date(3000, 12, 31)
    prev = gregorian_to_solar_hijri(d.year, d.month, d.day)
    while d < end:
        d += timedelta(days=1)
        sh = gregorian_to_solar_hijri(d.year, d.month, d.day)
        assert solar_hijri_to_gregorian(*sh) == (d.year, d.month, d.day)

        jy, jm, jd = prev
        if jd < solar_hijri_month_length(jy, jm):
            expected = (jy, jm, jd + 1)
        elif jm < 12:
            expected = (jy, jm + 1, 1)
        else:
            expected = (jy + 1, 1, 1)
        assert sh == expected, d
        prev = sh

def test_solar_hijri_round_trip():
    for jy in range(379, 2380):
        prev = None
        for jm in range(1, 13):
            for jd in range(1, solar_hijri_month_length(jy, jm) + 1):
                g = solar_hijri_to_gregorian(jy, jm, jd)
                assert gregorian_to_solar_hijri(*g) == (jy, jm, jd)
                cur = date(*g)
                if prev is not None:
                    assert (cur - prev).days == 1
                prev = cur

def test_year_lengths_agree_with_leap_rule():
    for jy in range(1, 3500):
        span = (date(*nowruz(jy + 1)) - date(*nowruz(jy))).days
        assert span == (366 if is_solar_hijri_leap(jy) else 365), jy

def test_random_round_trip_before_1600():
    random.seed(42)
    start = date(700, 1, 1).toordinal()
    stop = date(1600, 12, 31).toordinal()
    for _ in range(10000):
        d = date.fromordinal(random.randint(start, stop))
        sh = gregorian_to_solar_hijri(d.year, d.month, d.day)
        assert solar_hijri_to_gregorian(*sh) == (d.year, d.month, d.day)

def test_nowruz_stays_near_march_equinox():
    for jy in range(1200, 1600):
        gy, gm, gd = nowruz(jy)
        assert gm == 3 and 18 <= gd <= 23

def test_calendar_date_convert():
    sh = CalendarDate(SOLAR_HIJRI, 1403, 1, 1)
    g = sh.convert()
    assert g == CalendarDate(GREGORIAN, 2024, 3, 20)
    assert convert(g) == sh
    assert sh.key() == "1403-01-01"

def test_calendar_date_validated():
    assert CalendarDate.validated(SOLAR_HIJRI, 1403, 12, 30).day == 30
    with pytest.raises(InvalidDateError):
        CalendarDate.validated(SOLAR_HIJRI, 1402, 12, 30)
    with pytest.raises(InvalidDateError):
        CalendarDate.validated(GREGORIAN, 2023, 2, 29)
    with pytest.raises(InvalidDateError):
        CalendarDate.validated(GREGORIAN, 0, 1, 1)
    with pytest.raises(InvalidDateError):
        CalendarDate.validated(GREGORIAN, 2024, 13, 1)
