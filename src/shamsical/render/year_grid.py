from __future__ import annotations

from typing import Callable, List

from .colors import strip_ansi, visible_len
from .month_grid import TITLE_WIDTH

GUTTER = "    "


def _pad_block(lines: List[str], width: int) -> List[str]:
    # the title bar is already `width` wide
    out = lines[:1]
    for line in lines[1:]:
        if not strip_ansi(line).strip():
            out.append(" " * width)
        elif visible_len(line) < width:
            out.append(line + " " * (width - visible_len(line)))
        else:
            out.append(line)
    return out


def year_lines(
    month_lines: Callable[[int], List[str]],
    *,
    columns: int = 4,
    width: int = TITLE_WIDTH,
) -> List[str]:
    """Lay out the 12 months produced by `month_lines(m)` side by side."""
    out: List[str] = []
    for first in range(1, 13, columns):
        blocks = [_pad_block(month_lines(m), width) for m in range(first, min(first + columns, 13))]
        height = max(len(b) for b in blocks)
        for b in blocks:
            b.extend([" " * width] * (height - len(b)))
        for i in range(height):
            out.append("".join(b[i] + GUTTER for b in blocks))
        out.append("")
    return out
