"""
Reference clock for century inference and age computation.

Operations that depend on "now" take an optional ``now`` argument. When it is
omitted the system clock is read once, in UTC.
"""

from datetime import date, datetime, timezone
from typing import Optional, Union

Instant = Union[datetime, date]


def current_time(now: Optional[Instant] = None) -> datetime:
    """
    Return the reference instant as an aware UTC datetime.

    Args:
        now: Explicit reference instant. Naive datetimes are taken as UTC,
            aware ones are converted, plain dates mean midnight UTC.
    """
    if now is None:
        return datetime.now(timezone.utc)
    if isinstance(now, datetime):
        if now.tzinfo is None:
            return now.replace(tzinfo=timezone.utc)
        return now.astimezone(timezone.utc)
    if isinstance(now, date):
        return datetime(now.year, now.month, now.day, tzinfo=timezone.utc)
    raise TypeError(f"Unsupported reference time: {type(now).__name__}")


def reference_year(now: Optional[Instant] = None) -> int:
    return current_time(now).year
