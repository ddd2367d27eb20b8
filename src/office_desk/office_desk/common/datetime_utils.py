from __future__ import annotations

from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD (or a full ISO timestamp) into a date."""
    value = value.strip()
    if len(value) > 10:
        return parse_iso_datetime(value).date()
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp; a trailing 'Z' is accepted and dropped."""
    value = value.strip()
    if value.endswith("Z"):
        value = value[:-1]
    parsed = datetime.fromisoformat(value)
    return parsed.replace(tzinfo=None)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now()


def minutes_between(start: datetime, end: datetime) -> int:
    return int((end - start).total_seconds() // 60)
