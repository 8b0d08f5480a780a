class ShamsiCalError(Exception):
    """Base error."""

class OutOfRangeError(ShamsiCalError, ValueError):
    """Raised when a month or weekday index is outside its valid range."""

class InvalidDateError(ShamsiCalError, ValueError):
    """Raised for malformed date strings or dates that do not exist in their calendar."""

class HolidayFetchError(ShamsiCalError):
    """Raised when holiday data cannot be retrieved or parsed."""
