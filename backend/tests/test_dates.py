from datetime import date, datetime, timezone

import pytest

from liftlog.dates import (
    format_display_date,
    format_local_date,
    from_store,
    local_day_bounds,
    parse_local_date,
)
from liftlog.settings import get_settings

@pytest.mark.parametrize("s", ["2025-01-15", "2024-02-29", "1999-12-31", "2025-10-01"])
def test_local_date_roundtrip(s):
    assert format_local_date(parse_local_date(s)) == s

@pytest.mark.parametrize("s", ["2025-1-5", "2025-02-30", "20250115", "", "2025-01-15T00:00:00"])
def test_parse_rejects_non_calendar_strings(s):
    with pytest.raises(ValueError):
        parse_local_date(s)

def test_day_bounds_in_utc():
    start, end = local_day_bounds(date(2025, 1, 15))
    assert start == datetime(2025, 1, 15, tzinfo=timezone.utc)
    assert end == datetime(2025, 1, 16, tzinfo=timezone.utc)

def test_day_bounds_follow_configured_zone(monkeypatch):
    monkeypatch.setattr(get_settings(), "TIMEZONE", "America/New_York")
    start, end = local_day_bounds(date(2025, 1, 15))
    assert start == datetime(2025, 1, 15, 5, tzinfo=timezone.utc)
    assert end == datetime(2025, 1, 16, 5, tzinfo=timezone.utc)

def test_format_local_date_shifts_aware_values(monkeypatch):
    monkeypatch.setattr(get_settings(), "TIMEZONE", "Asia/Tokyo")
    late = datetime(2025, 1, 15, 23, 30, tzinfo=timezone.utc)
    assert format_local_date(late) == "2025-01-16"
    # naive values are already local
    assert format_local_date(datetime(2025, 1, 15, 23, 30)) == "2025-01-15"

@pytest.mark.parametrize("day,label", [
    (1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"),
    (12, "12th"), (13, "13th"), (21, "21st"), (22, "22nd"), (23, "23rd"), (31, "31st"),
])
def test_display_date_suffixes(day, label):
    assert format_display_date(date(2025, 1, day)) == f"{label} Jan 2025"

def test_stored_naive_values_read_back_as_utc(monkeypatch):
    monkeypatch.setattr(get_settings(), "TIMEZONE", "Asia/Tokyo")
    stored = datetime(2025, 1, 15, 23, 30)
    assert from_store(stored) == datetime(2025, 1, 15, 23, 30, tzinfo=timezone.utc)
    assert format_local_date(from_store(stored)) == "2025-01-16"
    aware = datetime(2025, 1, 15, 23, 30, tzinfo=timezone.utc)
    assert from_store(aware) is aware

def test_last_day_has_no_upper_bound():
    with pytest.raises(OverflowError):
        local_day_bounds(parse_local_date("9999-12-31"))
