from __future__ import annotations

import argparse
from datetime import date
import sys
import importlib
import inspect
from typing import Dict, List, Optional, Tuple

from .core.errors import HolidayFetchError, InvalidDateError, ShamsiCalError
from .core.types import GREGORIAN, SOLAR_HIJRI, CalendarDate
from .engines.converter import gregorian_to_solar_hijri
from .holidays import fetch_holidays, fetch_holidays_span
from .render.month_grid import gregorian_month_lines, solar_hijri_month_lines
from .render.report import conversion_lines, holiday_lines_gregorian, holiday_lines_solar_hijri
from .render.year_grid import year_lines

USAGE = "shamsical [flags] [year] [month] [--show-holidays]"

EXAMPLES = """\
Examples:
  shamsical                           # Show current month (Shamsi)
  shamsical -g                        # Show current month (Gregorian)
  shamsical 1404                      # Show all months for Shamsi year 1404
  shamsical -g 2025                   # Show all months for Gregorian year 2025
  shamsical 1404 7                    # Show Shamsi month 7 of year 1404
  shamsical -g 2025 10                # Show Gregorian month 10 of year 2025
  shamsical 1404 7 --show-holidays    # Show holidays for Shamsi month

  # Date conversion examples:
  shamsical -c 1403/09/15             # Convert Shamsi to Gregorian
  shamsical -c 1403-09-15             # Same as above (different separator)
  shamsical -g -c 2024/12/05          # Convert Gregorian to Shamsi

  # Diagnostics:
  shamsical diag round-trip --start 1000 --end 3000
"""

DIAG_TOOLS = {
    "round-trip": "shamsical.diagnostics.round_trip",
    "nowruz-table": "shamsical.diagnostics.nowruz_table",
    "leap-years": "shamsical.diagnostics.leap_years",
    "nowruz-scatter": "shamsical.diagnostics.nowruz_scatter",
}


def parse_date(s: str) -> Tuple[int, int, int]:
    """Parse YYYY/MM/DD, YYYY-MM-DD or YYYY.MM.DD."""
    parts = s.replace("-", "/").replace(".", "/").split("/")
    if len(parts) != 3:
        raise InvalidDateError("invalid date format, expected YYYY/MM/DD, YYYY-MM-DD, or YYYY.MM.DD")
    try:
        y, m, d = (int(p) for p in parts)
    except ValueError as e:
        raise InvalidDateError("invalid date values") from e
    if not (1 <= m <= 12 and 1 <= d <= 31):
        raise InvalidDateError("date out of range")
    return y, m, d


def _run_module_main(modpath: str, argv: List[str]) -> int:
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_diag(argv: List[str]) -> int:
    p = argparse.ArgumentParser(prog="shamsical diag", description="Calendar engine diagnostics")
    p.add_argument("tool", choices=sorted(DIAG_TOOLS), help="Which diagnostic to run")
    args, rest = p.parse_known_args(argv)
    return _run_module_main(DIAG_TOOLS[args.tool], rest)


def cmd_convert(text: str, *, gregorian: bool, with_holidays: bool = True) -> int:
    y, m, d = parse_date(text)
    calendar = GREGORIAN if gregorian else SOLAR_HIJRI
    try:
        src = CalendarDate.validated(calendar, y, m, d)
    except InvalidDateError as e:
        label = "Gregorian" if gregorian else "Shamsi"
        raise InvalidDateError(f"invalid {label} date: {e}") from e

    holidays: Dict[str, str] = {}
    if with_holidays:
        sh_year = src.convert().year if gregorian else src.year
        try:
            holidays = fetch_holidays(sh_year)
        except HolidayFetchError as e:
            print(f"Warning: holidays unavailable: {e}", file=sys.stderr)

    print("\n".join(conversion_lines(src, holidays)))
    return 0


def _holidays(first: int, last: int, enabled: bool) -> Dict[str, str]:
    if not enabled:
        return {}
    if first == last:
        return fetch_holidays(first)
    return fetch_holidays_span(first, last)


def _print_block(lines: List[str]) -> None:
    print("\n".join(lines))
    print()


def cmd_show(
    year: Optional[int],
    month: Optional[int],
    *,
    gregorian: bool,
    show_holidays: bool = False,
    with_holidays: bool = True,
    today: Optional[date] = None,
) -> int:
    """Print the current month, a whole year, or one month."""
    highlight = 0
    if year is None:
        t = today or date.today()
        if gregorian:
            year, month, highlight = t.year, t.month, t.day
        else:
            year, month, highlight = gregorian_to_solar_hijri(t.year, t.month, t.day)

    if gregorian:
        # a Gregorian year spans two Solar Hijri years
        jy = gregorian_to_solar_hijri(year, 1, 1)[0]
        holidays = _holidays(jy, jy + 1, with_holidays)
    else:
        holidays = _holidays(year, year, with_holidays)

    gy = year
    if month is None:
        if gregorian:
            lines = year_lines(lambda m: gregorian_month_lines(gy, m, 0, holidays))
        else:
            lines = year_lines(lambda m: solar_hijri_month_lines(gy, m, 0, holidays))
        print("\n".join(lines))
        return 0

    if gregorian:
        _print_block(gregorian_month_lines(year, month, highlight, holidays))
        if show_holidays:
            print("\n".join(holiday_lines_gregorian(year, month, holidays)))
    else:
        _print_block(solar_hijri_month_lines(year, month, highlight, holidays))
        if show_holidays:
            print("\n".join(holiday_lines_solar_hijri(year, month, holidays)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="shamsical",
        usage=USAGE,
        description="Persian (Solar Hijri) terminal calendar and date converter.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("-g", "--gregorian", action="store_true", help="Use Gregorian calendar instead of Shamsi")
    p.add_argument(
        "-c", "--convert", metavar="DATE", default="",
        help="Convert date between calendars (YYYY/MM/DD, YYYY-MM-DD or YYYY.MM.DD). "
             "Default: Shamsi to Gregorian; with -g: Gregorian to Shamsi",
    )
    p.add_argument("--show-holidays", action="store_true", help="Show holidays for the selected month")
    p.add_argument("--no-holidays", action="store_true", help="Do not fetch holiday data")
    p.add_argument("args", nargs="*", metavar="year [month]", help="Year (Shamsi, or Gregorian with -g) and month (1-12)")
    return p


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if argv and argv[0] == "diag":
        return cmd_diag(argv[1:])

    p = build_parser()
    args = p.parse_args(argv)

    if args.args and args.args[0] == "help":
        p.print_help()
        return 0

    try:
        if args.convert:
            return cmd_convert(args.convert, gregorian=args.gregorian, with_holidays=not args.no_holidays)

        year: Optional[int] = None
        month: Optional[int] = None
        if len(args.args) > 2:
            print(f"Usage: {USAGE}")
            print("Try 'shamsical --help' for more information.")
            return 1
        if len(args.args) == 1:
            try:
                year = int(args.args[0])
            except ValueError:
                year = 0
            if year < 1:
                print("Invalid year argument.")
                return 1
        elif len(args.args) == 2:
            try:
                year, month = int(args.args[0]), int(args.args[1])
            except ValueError:
                year, month = 0, 0
            if year < 1 or not 1 <= month <= 12:
                print("Invalid year or month argument.")
                return 1

        try:
            return cmd_show(
                year,
                month,
                gregorian=args.gregorian,
                show_holidays=args.show_holidays,
                with_holidays=not args.no_holidays,
            )
        except HolidayFetchError as e:
            print(f"Error fetching holidays: {e}", file=sys.stderr)
            return 1
    except ShamsiCalError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
