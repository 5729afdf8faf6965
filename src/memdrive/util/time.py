from __future__ import annotations

from datetime import datetime, timezone

_MONTHS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def now_utc() -> datetime:
    """Return current time as tz-aware UTC datetime."""
    return datetime.now(timezone.utc)


def normalize_dt(dt: datetime) -> datetime:
    """Ensure datetime is tz-aware. Raises if naive."""
    if not isinstance(dt, datetime):
        raise TypeError("dt must be a datetime")
    if dt.tzinfo is None:
        raise ValueError("naive datetime is not allowed; timezone-aware required")
    return dt


def format_date(dt: datetime) -> str:
    """
    Format a timestamp as a short US date, e.g. "Jan 15, 2025".

    Uses the datetime's own timezone and does not depend on the process locale.
    """
    dt = normalize_dt(dt)
    return f"{_MONTHS[dt.month - 1]} {dt.day}, {dt.year}"
