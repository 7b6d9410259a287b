# bikeflow/traffic/trip_filter.py
from __future__ import annotations

from typing import List, Sequence

from .time_codec import minutes_since_midnight
from .types import ANY_TIME, Trip

WINDOW_MINUTES = 60


def trip_in_window(trip: Trip, center: int, window: int = WINDOW_MINUTES) -> bool:
    """
    True if the trip starts OR ends within +/- window minutes of center.

    Plain subtraction on the minutes-of-day clock: there is no wraparound,
    so 23:50 is 1425 minutes away from 00:05, not 15.
    """
    started = minutes_since_midnight(trip.started_at)
    ended = minutes_since_midnight(trip.ended_at)
    return abs(started - center) <= window or abs(ended - center) <= window


def filter_trips_by_time(trips: Sequence[Trip], center: int) -> Sequence[Trip]:
    """
    Trips near a time of day.

    center == ANY_TIME returns `trips` itself (no copy). Otherwise a new list
    in input order.
    """
    if center == ANY_TIME:
        return trips

    return [t for t in trips if trip_in_window(t, center)]
