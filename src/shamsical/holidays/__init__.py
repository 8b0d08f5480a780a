"""Holiday data retrieval (network) and its on-disk cache."""
from .cache import cache_path, default_cache_dir, read_cache, write_cache
from .fetch import fetch_holidays, fetch_holidays_span, holiday_url, parse_holiday_payload

__all__ = [
    "cache_path",
    "default_cache_dir",
    "read_cache",
    "write_cache",
    "fetch_holidays",
    "fetch_holidays_span",
    "holiday_url",
    "parse_holiday_payload",
]
