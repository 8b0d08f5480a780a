"""Pure calendar arithmetic: leap years, month lengths, conversion, weekdays."""
