from __future__ import annotations

import argparse
from typing import List, Tuple

from ..engines.leap import is_gregorian_leap, is_solar_hijri_leap, solar_hijri_cycle_position
from ..core.types import GREGORIAN, SOLAR_HIJRI
from ..engines.month_length import year_length


def leap_years(calendar: str, start: int, end: int) -> List[int]:
    pred = is_solar_hijri_leap if calendar == SOLAR_HIJRI else is_gregorian_leap
    return [y for y in range(start, end + 1) if pred(y)]


def gaps(years: List[int]) -> List[Tuple[int, int]]:
    """(year, distance to previous leap year) for every leap year after the first."""
    return [(b, b - a) for a, b in zip(years, years[1:])]


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="List leap years with their 33-year cycle position.")
    p.add_argument("--calendar", choices=(SOLAR_HIJRI, GREGORIAN), default=SOLAR_HIJRI)
    p.add_argument("--from-year", type=int, default=1370)
    p.add_argument("--to-year", type=int, default=1440)
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    years = leap_years(args.calendar, args.from_year, args.to_year)
    prev = dict(gaps(years))
    for y in years:
        extra = f"  cycle={solar_hijri_cycle_position(y):2d}" if args.calendar == SOLAR_HIJRI else ""
        gap = f"  gap={prev[y]}" if y in prev else ""
        print(f"{y}  days={year_length(args.calendar, y)}{extra}{gap}")

    print(f"\n{len(years)} leap years in {args.from_year}..{args.to_year}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
