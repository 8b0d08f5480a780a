# tests/test_holidays.py

import http.client
import json
import pytest
import urllib.error
from unittest.mock import MagicMock, patch

from shamsical.core.errors import HolidayFetchError
from shamsical.holidays import (
    cache_path,
    default_cache_dir,
    fetch_holidays,
    fetch_holidays_span,
    holiday_url,
    parse_holiday_payload,
    read_cache,
    write_cache,
)

def _day(y, m, d, holiday, events=()):
    return {
        "solar": {"day": d, "month": m, "year": y, "dayWeek": "x"},
        "holiday": holiday,
        "event": list(events),
    }

PAYLOAD = {
    "status": True,
    "result": {
        "1": {
            "1": _day(1403, 1, 1, True, ["Nowruz"]),
            "2": _day(1403, 1, 2, True, ["Nowruz", "Second day"]),
            "5": _day(1403, 1, 5, False, ["Not a day off"]),
        },
        "3": {
            "14": _day(1403, 3, 14, True),
        },
    },
}

@pytest.fixture
def cache_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("SHAMSICAL_CACHE_DIR", str(tmp_path))
    return tmp_path

def _response(payload, status=200):
    resp = MagicMock()
    resp.status = status
    resp.read.return_value = json.dumps(payload).encode("utf-8")
    cm = MagicMock()
    cm.__enter__.return_value = resp
    cm.__exit__.return_value = False
    return cm

def test_parse_payload():
    h = parse_holiday_payload(PAYLOAD)
    assert h == {
        "1403-01-01": "Nowruz",
        "1403-01-02": "Nowruz; Second day",
        "1403-03-14": "Holiday",
    }

def test_parse_payload_status_false():
    with pytest.raises(HolidayFetchError):
        parse_holiday_payload({"status": False, "result": {}})

def test_parse_payload_malformed_entry():
    with pytest.raises(HolidayFetchError):
        parse_holiday_payload({"status": True, "result": {"1": {"1": {"holiday": True}}}})

def test_cache_location(monkeypatch, tmp_path):
    monkeypatch.delenv("SHAMSICAL_CACHE_DIR", raising=False)
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path))
    assert default_cache_dir() == tmp_path / "shamsical"
    assert cache_path(1403) == tmp_path / "shamsical" / "holidays_1403.json"

def test_cache_round_trip(tmp_path):
    p = tmp_path / "sub" / "holidays_1403.json"
    assert read_cache(p) is None
    write_cache(p, {"1403-01-01": "نوروز"})
    assert read_cache(p) == {"1403-01-01": "نوروز"}

def test_corrupt_cache_is_ignored(tmp_path):
    p = tmp_path / "holidays_1403.json"
    p.write_text("{not json", encoding="utf-8")
    assert read_cache(p) is None

def test_holiday_url_override(monkeypatch):
    monkeypatch.delenv("SHAMSICAL_HOLIDAY_URL", raising=False)
    assert holiday_url(1403) == "https://pnldev.com/api/calender?year=1403&holiday=true"
    monkeypatch.setenv("SHAMSICAL_HOLIDAY_URL", "http://localhost/h/{year}")
    assert holiday_url(1404) == "http://localhost/h/1404"

def test_fetch_writes_then_reads_cache(cache_dir):
    with patch("urllib.request.urlopen", return_value=_response(PAYLOAD)) as mock:
        h1 = fetch_holidays(1403)
        h2 = fetch_holidays(1403)
    assert mock.call_count == 1
    assert h1 == h2
    assert (cache_dir / "holidays_1403.json").exists()

def test_fetch_without_cache(cache_dir):
    with patch("urllib.request.urlopen", return_value=_response(PAYLOAD)) as mock:
        fetch_holidays(1403, use_cache=False)
        fetch_holidays(1403, use_cache=False)
    assert mock.call_count == 2
    assert not (cache_dir / "holidays_1403.json").exists()

def test_fetch_network_error(cache_dir):
    with patch("urllib.request.urlopen", side_effect=urllib.error.URLError("down")):
        with pytest.raises(HolidayFetchError):
            fetch_holidays(1403)

def test_fetch_bad_status(cache_dir):
    with patch("urllib.request.urlopen", return_value=_response(PAYLOAD, status=500)):
        with pytest.raises(HolidayFetchError, match="status code"):
            fetch_holidays(1403)

def test_fetch_bad_json(cache_dir):
    resp = _response(PAYLOAD)
    resp.__enter__.return_value.read.return_value = b"<html>"
    with patch("urllib.request.urlopen", return_value=resp):
        with pytest.raises(HolidayFetchError, match="JSON"):
            fetch_holidays(1403)

def test_fetch_body_not_utf8(cache_dir):
    resp = _response(PAYLOAD)
    resp.__enter__.return_value.read.return_value = b"\xff\xfe{bad"
    with patch("urllib.request.urlopen", return_value=resp):
        with pytest.raises(HolidayFetchError, match="UTF-8"):
            fetch_holidays(1403)
    assert not (cache_dir / "holidays_1403.json").exists()

def test_fetch_incomplete_read(cache_dir):
    resp = _response(PAYLOAD)
    resp.__enter__.return_value.read.side_effect = http.client.IncompleteRead(b"{")
    with patch("urllib.request.urlopen", return_value=resp):
        with pytest.raises(HolidayFetchError):
            fetch_holidays(1403)

def test_span_tolerates_missing_later_years(cache_dir, capsys):
    def fake(year, **kwargs):
        if year == 1403:
            return {"1403-01-01": "Nowruz"}
        raise HolidayFetchError("down")

    with patch("shamsical.holidays.fetch.fetch_holidays", side_effect=fake):
        h = fetch_holidays_span(1403, 1404)
    assert h == {"1403-01-01": "Nowruz"}
    assert "Warning" in capsys.readouterr().err

def test_span_requires_first_year(cache_dir):
    with patch("shamsical.holidays.fetch.fetch_holidays", side_effect=HolidayFetchError("down")):
        with pytest.raises(HolidayFetchError):
            fetch_holidays_span(1403, 1404)

def test_fetch_prints_status_line(cache_dir, capsys):
    with patch("urllib.request.urlopen", return_value=_response(PAYLOAD)):
        fetch_holidays(1403)
        fetch_holidays(1403)
    err = capsys.readouterr().err
    assert err.count("Fetching holidays for 1403 ...") == 1
