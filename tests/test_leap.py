# tests/test_leap.py

import pytest

from shamsical.engines.leap import (
    SOLAR_HIJRI_LEAP_RESIDUES,
    is_gregorian_leap,
    is_solar_hijri_leap,
    solar_hijri_cycle_position,
)

def test_gregorian_fixtures():
    assert is_gregorian_leap(2000)
    assert not is_gregorian_leap(1900)
    assert is_gregorian_leap(2024)
    assert not is_gregorian_leap(2023)
    assert not is_gregorian_leap(2100)
    assert is_gregorian_leap(1600)

@pytest.mark.parametrize("year", [1370, 1375, 1379, 1383, 1387, 1391, 1395, 1399, 1403, 1408])
def test_known_solar_hijri_leap_years(year):
    assert is_solar_hijri_leap(year)

@pytest.mark.parametrize("year", [1400, 1401, 1402, 1404, 1405, 1406, 1407])
def test_known_solar_hijri_common_years(year):
    assert not is_solar_hijri_leap(year)

def test_eight_leap_years_per_33():
    for start in (1, 474, 979, 1390, 2500):
        n = sum(is_solar_hijri_leap(y) for y in range(start, start + 33))
        assert n == 8

def test_cycle_position_uses_residue_set():
    for y in range(1, 200):
        assert is_solar_hijri_leap(y) == (solar_hijri_cycle_position(y) in SOLAR_HIJRI_LEAP_RESIDUES)
        assert 0 <= solar_hijri_cycle_position(y) <= 32
