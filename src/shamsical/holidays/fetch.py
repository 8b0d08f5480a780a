from __future__ import annotations

import http.client
import json
import os
import sys
import urllib.error
import urllib.request
from pathlib import Path
from typing import Any, Dict, Optional

from ..core.errors import HolidayFetchError
from ..core.types import holiday_key
from .cache import cache_path, read_cache, write_cache

DEFAULT_HOLIDAY_URL = "https://pnldev.com/api/calender?year={year}&holiday=true"


def holiday_url(year: int) -> str:
    template = os.environ.get("SHAMSICAL_HOLIDAY_URL") or DEFAULT_HOLIDAY_URL
    return template.format(year=year)


def _fetch(url: str, timeout: float) -> str:
    try:
        with urllib.request.urlopen(url, timeout=timeout) as r:
            status = getattr(r, "status", 200)
            if status != 200:
                raise HolidayFetchError(f"unexpected status code: {status}")
            return r.read().decode("utf-8")
    except urllib.error.HTTPError as e:
        raise HolidayFetchError(f"unexpected status code: {e.code}") from e
    except (urllib.error.URLError, http.client.HTTPException, OSError) as e:
        raise HolidayFetchError(f"failed to fetch holidays: {e}") from e
    except UnicodeDecodeError as e:
        raise HolidayFetchError(f"response is not valid UTF-8: {e}") from e


def parse_holiday_payload(payload: Dict[str, Any]) -> Dict[str, str]:
    """
    Flatten the calendar API response into {"YYYY-MM-DD": description}.

    Expected shape:
      {"status": true,
       "result": {"<month>": {"<day>": {"solar": {"year": .., "month": .., "day": ..},
                                        "holiday": true, "event": ["..."]}}}}

    Only days flagged as holidays are kept; several events are joined with "; ".
    """
    if not payload.get("status"):
        raise HolidayFetchError("API returned status false")
    result = payload.get("result")
    if not isinstance(result, dict):
        raise HolidayFetchError("API response has no 'result' mapping")

    holidays: Dict[str, str] = {}
    try:
        for days in result.values():
            for day in days.values():
                if not day.get("holiday"):
                    continue
                solar = day["solar"]
                key = holiday_key(int(solar["year"]), int(solar["month"]), int(solar["day"]))
                events = day.get("event") or []
                holidays[key] = "; ".join(events) if events else "Holiday"
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise HolidayFetchError(f"malformed holiday entry: {e}") from e
    return holidays


def fetch_holidays(
    year: int,
    *,
    use_cache: bool = True,
    cache_dir: Optional[Path] = None,
    timeout: float = 10.0,
) -> Dict[str, str]:
    """Holidays of Solar Hijri `year`, from the cache when possible."""
    path = cache_path(year, cache_dir)
    if use_cache:
        cached = read_cache(path)
        if cached is not None:
            return cached

    print(f"Fetching holidays for {year} ...", file=sys.stderr)
    text = _fetch(holiday_url(year), timeout)
    try:
        payload = json.loads(text)
    except ValueError as e:
        raise HolidayFetchError(f"failed to parse JSON: {e}") from e
    if not isinstance(payload, dict):
        raise HolidayFetchError("failed to parse JSON: top level is not an object")
    holidays = parse_holiday_payload(payload)

    if use_cache:
        try:
            write_cache(path, holidays)
        except OSError as e:
            print(f"Warning: failed to save to cache: {e}", file=sys.stderr)
    return holidays


def fetch_holidays_span(first_year: int, last_year: int, **kwargs: Any) -> Dict[str, str]:
    """
    Merge holidays for a run of Solar Hijri years.

    The first year must load; later ones are best effort, since a Gregorian
    view only needs them for its last months.
    """
    holidays = dict(fetch_holidays(first_year, **kwargs))
    for year in range(first_year + 1, last_year + 1):
        try:
            holidays.update(fetch_holidays(year, **kwargs))
        except HolidayFetchError as e:
            print(f"Warning: no holidays for {year}: {e}", file=sys.stderr)
    return holidays
