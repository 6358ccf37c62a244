"""Date helpers for meal queries."""

import re
from datetime import date, datetime
from zoneinfo import ZoneInfo

from school_meals.domain.errors import EmptyInputError

_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def to_query_key(date_str: str) -> str:
    """Convert a YYYY-MM-DD date into the YYYYMMDD query key."""
    return date_str.replace("-", "")


def today_iso(timezone: str) -> str:
    """Return today's date in the given timezone as YYYY-MM-DD."""
    return datetime.now(ZoneInfo(timezone)).date().isoformat()


def require_date(value: str | None) -> str:
    """Validate caller input before a query is issued.

    Raises EmptyInputError for a missing or blank value and ValueError when
    the value is not a YYYY-MM-DD calendar date.
    """
    if value is None or not value.strip():
        raise EmptyInputError("No date supplied")
    cleaned = value.strip()
    if not _ISO_DATE.fullmatch(cleaned):
        raise ValueError(f"Expected a YYYY-MM-DD date, got {cleaned!r}")
    date.fromisoformat(cleaned)
    return cleaned
