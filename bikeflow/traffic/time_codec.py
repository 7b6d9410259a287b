# bikeflow/traffic/time_codec.py
from __future__ import annotations

from datetime import datetime

from .types import ANY_TIME, MINUTES_PER_DAY


def minutes_since_midnight(ts: datetime) -> int:
    """
    Wall-clock minutes since midnight, 0..1439.
    Seconds and anything finer are dropped.
    """
    return ts.hour * 60 + ts.minute


def format_time(minutes: int) -> str:
    """
    Short time-of-day label, e.g. 0 -> "12:00 AM", 810 -> "1:30 PM".

    Precondition: 0 <= minutes < 1440. Values outside that range are not
    handled here; validate with is_valid_time_filter() first.
    """
    hour, minute = divmod(int(minutes), 60)
    suffix = "AM" if hour < 12 else "PM"
    hour12 = hour % 12 or 12
    return f"{hour12}:{minute:02d} {suffix}"


def is_valid_time_filter(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return value == ANY_TIME or 0 <= value < MINUTES_PER_DAY
