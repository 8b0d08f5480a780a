"""Leap-year predicates for the Solar Hijri and Gregorian calendars."""
from __future__ import annotations

# Positions of the eight leap years inside a 33-year sub-cycle.
SOLAR_HIJRI_LEAP_RESIDUES = frozenset((1, 5, 9, 13, 17, 22, 26, 30))


def solar_hijri_cycle_position(year: int) -> int:
    """Position of `year` inside its 33-year sub-cycle (0..32).

    The sub-cycles are aligned with the ones peeled off by the date converter
    (Solar Hijri 979 starts at position 22), so the predicate below and the
    converter agree on every year.
    """
    return year % 33


def is_solar_hijri_leap(year: int) -> bool:
    return solar_hijri_cycle_position(year) in SOLAR_HIJRI_LEAP_RESIDUES


def is_gregorian_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or (year % 400 == 0)
