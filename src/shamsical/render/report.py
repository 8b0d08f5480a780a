from __future__ import annotations

from typing import List, Mapping, Optional

from ..core.types import GREGORIAN, CalendarDate, holiday_key
from ..engines.converter import gregorian_to_solar_hijri
from ..engines.month_length import gregorian_month_length
from ..engines.weekday import weekday_name
from .colors import ACCENT, BANNER, DAY, HEADER, HIGHLIGHT, OFFDAY, rgb
from .month_grid import month_holidays
from .names import GREGORIAN_MONTHS, SOLAR_HIJRI_MONTHS

RULE_WIDTH = 60
HOLIDAYS_HEADING = "\N{PUSHPIN} Holidays in this month:"
NO_HOLIDAYS = "No holidays in this month."


def holiday_lines_solar_hijri(jy: int, jm: int, holidays: Mapping[str, str]) -> List[str]:
    lines = [HOLIDAYS_HEADING]
    for d, desc in month_holidays(jy, jm, holidays).items():
        lines.append(f"- {d:02d} {SOLAR_HIJRI_MONTHS[jm - 1]}: {desc}")
    if len(lines) == 1:
        lines.append(NO_HOLIDAYS)
    return lines


def holiday_lines_gregorian(gy: int, gm: int, holidays: Mapping[str, str]) -> List[str]:
    lines = [HOLIDAYS_HEADING]
    for d in range(1, gregorian_month_length(gy, gm) + 1):
        jy, jm, jd = gregorian_to_solar_hijri(gy, gm, d)
        desc = holidays.get(holiday_key(jy, jm, jd))
        if desc is not None:
            lines.append(f"- {d:02d} {GREGORIAN_MONTHS[gm - 1]}: {desc} (Shamsi: {jy}/{jm}/{jd})")
    if len(lines) == 1:
        lines.append(NO_HOLIDAYS)
    return lines


def _long_gregorian(d: CalendarDate) -> str:
    return f"{d.year:04d}/{d.month:02d}/{d.day:02d} - {GREGORIAN_MONTHS[d.month - 1]} {d.day}, {d.year}"


def _long_solar_hijri(d: CalendarDate) -> str:
    return f"{d.year:04d}/{d.month:02d}/{d.day:02d} - {d.day} {SOLAR_HIJRI_MONTHS[d.month - 1]} {d.year}"


def conversion_lines(source: CalendarDate, holidays: Optional[Mapping[str, str]] = None) -> List[str]:
    """
    Report for a single conversion: input, output, weekday and, when the
    Solar Hijri side is a known holiday, its description.
    """
    target = source.convert()
    if source.calendar == GREGORIAN:
        gregorian, solar = source, target
        banner = "Converting Gregorian to Shamsi"
        rows = [
            ("Input (Gregorian)", rgb(DAY, _long_gregorian(gregorian))),
            ("Output (Shamsi)", rgb(HIGHLIGHT, _long_solar_hijri(solar))),
        ]
    else:
        gregorian, solar = target, source
        banner = "Converting Shamsi to Gregorian"
        rows = [
            ("Input (Shamsi)", rgb(HIGHLIGHT, _long_solar_hijri(solar))),
            ("Output (Gregorian)", rgb(DAY, _long_gregorian(gregorian))),
        ]
    rows.append(("Day of Week", rgb(ACCENT, weekday_name(*gregorian.ymd()))))
    if holidays:
        desc = holidays.get(solar.key())
        if desc is not None:
            rows.append(("Holiday", rgb(OFFDAY, desc)))

    lines = [
        rgb(ACCENT, "=" * RULE_WIDTH),
        rgb(BANNER, f"\N{CALENDAR} {banner}"),
        rgb(ACCENT, "-" * RULE_WIDTH),
    ]
    lines += [f"{rgb(HEADER, label)}: {value}" for label, value in rows]
    lines.append(rgb(ACCENT, "=" * RULE_WIDTH))
    return lines
