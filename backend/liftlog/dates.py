"""Calendar-date helpers.

Dates travel as ``YYYY-MM-DD`` strings and mean a *local* calendar day in
the configured timezone, never a UTC instant.
"""
from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

from liftlog.settings import get_settings

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def local_tz() -> ZoneInfo:
    return ZoneInfo(get_settings().TIMEZONE)


def parse_local_date(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string. Raises ValueError otherwise."""
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise ValueError(f"invalid date {value!r}, expected YYYY-MM-DD")
    return date.fromisoformat(value)


def format_local_date(value: date | datetime) -> str:
    # aware datetimes are shifted into the local zone first, so 23:30Z can be tomorrow
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(local_tz())
        value = value.date()
    return value.isoformat()


def to_utc(value: datetime) -> datetime:
    """Normalise a datetime to aware UTC; naive values are local wall-clock time."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=local_tz())
    return value.astimezone(timezone.utc)


def from_store(value: datetime) -> datetime:
    # SQLite hands stored timestamps back naive; they were written as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def local_day_bounds(day: date) -> tuple[datetime, datetime]:
    """Half-open ``[start, end)`` UTC interval covering one local calendar day."""
    tz = local_tz()
    start = datetime.combine(day, time.min, tzinfo=tz)
    end = datetime.combine(day + timedelta(days=1), time.min, tzinfo=tz)
    return start.astimezone(timezone.utc), end.astimezone(timezone.utc)


def _ordinal_suffix(day: int) -> str:
    if 3 < day < 21:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def format_display_date(value: date | datetime) -> str:
    """Human label used in page headings, e.g. ``15th Jan 2025``."""
    if isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone(local_tz())
    return f"{value.day}{_ordinal_suffix(value.day)} {value.strftime('%b')} {value.year}"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
