from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional

from ..core.constants import WEEKDAYS


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def try_parse_iso_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        return None


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def weekday_name(d: date) -> str:
    return WEEKDAYS[d.weekday()]


def sunday_first_index(d: date) -> int:
    """Weekday index where Sunday is 0 and Saturday is 6."""
    return (d.weekday() + 1) % 7


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_utc_iso(value: datetime) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2025-01-15T08:00:00.000Z."""
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
