from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterator

from ..core.constants import DATE_FORMAT, TIME_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD (or a full ISO timestamp) into a calendar date."""
    value = str(value or "").strip()
    if len(value) > 10:
        return parse_iso_datetime(value).date()
    return datetime.strptime(value, DATE_FORMAT).date()


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO 8601 timestamp; a trailing 'Z' is accepted and dropped."""
    value = str(value or "").strip()
    if value.endswith("Z"):
        value = value[:-1]
    parsed = datetime.fromisoformat(value)
    return parsed.replace(tzinfo=None)


def parse_hhmm(value: str) -> time:
    return datetime.strptime(value.strip(), TIME_FORMAT).time()


def day_of_week(d: date) -> int:
    """Day index with Sunday as 0 and Saturday as 6."""
    return (d.weekday() + 1) % 7


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every date from start to end, both inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def combine(d: date, hhmm: str) -> datetime:
    return datetime.combine(d, parse_hhmm(hhmm))


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
