"""Timezone utilities for record timestamps."""

from datetime import datetime

import pytz

UTC = pytz.utc


def now_utc() -> datetime:
    """Return current time in UTC."""
    return datetime.now(UTC)


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC."""
    if dt.tzinfo is None:
        # SQLite hands back naive datetimes; they were stored as UTC
        return UTC.localize(dt)
    return dt.astimezone(UTC)
