from datetime import datetime, timedelta, timezone
from typing import Optional

_TICK = timedelta(microseconds=1)


def utcnow() -> datetime:
    # Naive UTC; SQLite hands back naive datetimes and the two must compare.
    return datetime.now(timezone.utc).replace(tzinfo=None)


def next_timestamp(previous: Optional[datetime] = None) -> datetime:
    """Sample the clock, never returning a value at or before ``previous``."""
    now = utcnow()
    if previous is not None and now <= previous:
        return previous + _TICK
    return now
