from __future__ import annotations
from dataclasses import dataclass
import re

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*[a-zA-Z]")


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int


def rgb(c: Color, s: str) -> str:
    """Wrap `s` in a 24-bit foreground color escape."""
    return f"\x1b[38;2;{c.r};{c.g};{c.b}m{s}\x1b[0m"


def strip_ansi(s: str) -> str:
    return _ANSI_RE.sub("", s)


def visible_len(s: str) -> int:
    return len(strip_ansi(s))


OFFDAY = Color(255, 0, 0)
TITLE = Color(255, 255, 255)
HEADER = Color(188, 188, 188)
DAY = Color(135, 206, 235)
HIGHLIGHT = Color(255, 255, 0)
ACCENT = Color(0, 255, 255)
BANNER = Color(200, 100, 255)
