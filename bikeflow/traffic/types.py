# bikeflow/traffic/types.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime

# time filter sentinel: no time-of-day window
ANY_TIME = -1
MINUTES_PER_DAY = 1440


@dataclass
class Station:
    """
    Station identity comes from the stations feed.

    arrivals / departures / total_traffic are a cache filled by
    compute_station_traffic(); they are only valid until the next pass.
    """
    short_name: str
    name: str
    lon: float
    lat: float
    arrivals: int = 0
    departures: int = 0
    total_traffic: int = 0


@dataclass(frozen=True)
class Trip:
    start_station_id: str
    end_station_id: str
    started_at: datetime
    ended_at: datetime
