"""Terminal rendering: ANSI colors, month and year grids, text reports."""
