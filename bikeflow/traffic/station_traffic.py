# bikeflow/traffic/station_traffic.py
from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from .types import Station, Trip


def count_by_station(trips: Iterable[Trip]) -> Tuple[Dict[str, int], Dict[str, int]]:
    """
    Single pass over trips.

    Returns:
      (departures, arrivals) keyed by station id
    """
    departures: Dict[str, int] = {}
    arrivals: Dict[str, int] = {}

    for trip in trips:
        s0 = trip.start_station_id
        s1 = trip.end_station_id
        departures[s0] = departures.get(s0, 0) + 1
        arrivals[s1] = arrivals.get(s1, 0) + 1

    return departures, arrivals


def compute_station_traffic(stations: List[Station], trips: Iterable[Trip]) -> List[Station]:
    """
    Attach arrivals / departures / total_traffic to every station.

    Updates the given Station objects in place and returns the same list.
    Stations without trips get 0. Trips pointing at station ids that are not
    in `stations` are ignored.
    """
    departures, arrivals = count_by_station(trips)

    for station in stations:
        sid = station.short_name
        station.arrivals = arrivals.get(sid, 0)
        station.departures = departures.get(sid, 0)
        station.total_traffic = station.arrivals + station.departures

    return stations
