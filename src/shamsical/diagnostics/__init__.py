"""Diagnostics package.

- round_trip, nowruz_table, leap_years: always available, no extras
- nowruz_scatter: requires the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["round_trip", "nowruz_table", "leap_years", "nowruz_scatter"]
