from __future__ import annotations

from typing import Callable, Dict, List, Mapping, Optional, Sequence

from ..core.types import holiday_key
from ..engines.converter import gregorian_to_solar_hijri, solar_hijri_to_gregorian
from ..engines.month_length import gregorian_month_length, solar_hijri_month_length
from ..engines.weekday import (
    first_weekday_of_gregorian_month,
    first_weekday_of_solar_hijri_month,
    is_friday,
    is_gregorian_weekend,
)
from .colors import DAY, HEADER, HIGHLIGHT, OFFDAY, TITLE, Color, rgb
from .names import (
    GREGORIAN_MONTHS,
    GREGORIAN_WEEKDAY_ABBR,
    SOLAR_HIJRI_MONTHS,
    SOLAR_HIJRI_WEEKDAY_ABBR,
)

CELL = 4
BLANK_CELL = " " * CELL


def _title_width() -> int:
    widths = [len(f"{name} 1400") for name in SOLAR_HIJRI_MONTHS]
    widths += [len(f"{name} 2024") for name in GREGORIAN_MONTHS]
    return max(max(widths) + 14, 28)


TITLE_WIDTH = _title_width()


def title_bar(text: str, width: int = TITLE_WIDTH) -> str:
    """Center `text` in a bar of '=' of the given width."""
    pad = width - len(text)
    left = pad // 2
    return "=" * left + text + "=" * (pad - left)


def _cell(d: int) -> str:
    return f"{d:>{CELL}d}"


def _grid(
    title: str,
    headers: Sequence[str],
    first_col: int,
    n_days: int,
    color_of: Callable[[int], Color],
) -> List[str]:
    lines = [rgb(TITLE, title_bar(title))]
    lines.append("".join(rgb(HEADER, f"{h:>{CELL}}") for h in headers))

    row = BLANK_CELL * first_col
    pos = first_col
    for d in range(1, n_days + 1):
        row += rgb(color_of(d), _cell(d))
        pos += 1
        if pos == 7:
            lines.append(row)
            row, pos = "", 0
    if pos:
        lines.append(row + BLANK_CELL * (7 - pos))
    return lines


def solar_hijri_month_lines(
    jy: int, jm: int, highlight: int = 0, holidays: Optional[Mapping[str, str]] = None
) -> List[str]:
    """Saturday-first grid; Fridays and holidays in red, `highlight` in yellow."""
    def color_of(d: int) -> Color:
        if d == highlight:
            return HIGHLIGHT
        if holidays and holiday_key(jy, jm, d) in holidays:
            return OFFDAY
        if is_friday(*solar_hijri_to_gregorian(jy, jm, d)):
            return OFFDAY
        return DAY

    return _grid(
        f"{SOLAR_HIJRI_MONTHS[jm - 1]} {jy}",
        SOLAR_HIJRI_WEEKDAY_ABBR,
        first_weekday_of_solar_hijri_month(jy, jm),
        solar_hijri_month_length(jy, jm),
        color_of,
    )


def gregorian_month_lines(
    gy: int, gm: int, highlight: int = 0, holidays: Optional[Mapping[str, str]] = None
) -> List[str]:
    """Sunday-first grid; holidays are looked up by their Solar Hijri key."""
    def color_of(d: int) -> Color:
        if d == highlight:
            return HIGHLIGHT
        jy, jm, jd = gregorian_to_solar_hijri(gy, gm, d)
        if holidays and holiday_key(jy, jm, jd) in holidays:
            return OFFDAY
        if is_gregorian_weekend(gy, gm, d):
            return OFFDAY
        return DAY

    return _grid(
        f"{GREGORIAN_MONTHS[gm - 1]} {gy}",
        GREGORIAN_WEEKDAY_ABBR,
        int(first_weekday_of_gregorian_month(gy, gm)),
        gregorian_month_length(gy, gm),
        color_of,
    )


def month_holidays(
    jy: int, jm: int, holidays: Mapping[str, str]
) -> Dict[int, str]:
    """Day -> description for the holidays of one Solar Hijri month."""
    out: Dict[int, str] = {}
    for d in range(1, solar_hijri_month_length(jy, jm) + 1):
        desc = holidays.get(holiday_key(jy, jm, d))
        if desc is not None:
            out[d] = desc
    return out
