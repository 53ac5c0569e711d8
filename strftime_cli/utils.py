"""Clock helpers for the strftime CLI."""
from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

from dateutil import tz


def local_now() -> datetime:
    return datetime.now(tz.tzlocal())


def start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def shift_fixed(value: datetime, delta: timedelta) -> datetime:
    """Add an exact duration, ignoring wall-clock jumps in the value's zone."""
    if value.tzinfo is None:
        return value + delta
    return (value.astimezone(timezone.utc) + delta).astimezone(value.tzinfo)


def to_unix(value: datetime) -> int:
    # Seconds before the epoch round down, not toward zero.
    return math.floor(value.timestamp())
