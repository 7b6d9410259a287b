# bikeflow/traffic/controller.py
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .scales import QuantizeScale, SqrtScale, flow_ratio
from .station_traffic import compute_station_traffic
from .time_codec import format_time, is_valid_time_filter
from .trip_filter import filter_trips_by_time
from .types import ANY_TIME, Station, Trip


@dataclass(frozen=True)
class StationView:
    key: str
    name: str
    lon: float
    lat: float
    arrivals: int
    departures: int
    total_traffic: int
    radius: float
    flow_bucket: float
    tooltip_text: str

    def to_dict(self) -> Dict[str, object]:
        return {
            "key": self.key,
            "name": self.name,
            "lon": self.lon,
            "lat": self.lat,
            "arrivals": self.arrivals,
            "departures": self.departures,
            "total_traffic": self.total_traffic,
            "radius": self.radius,
            "flow_bucket": self.flow_bucket,
            "tooltip_text": self.tooltip_text,
        }


@dataclass(frozen=True)
class TrafficView:
    time_filter: int
    selected_time: str  # "" when unfiltered
    stations: Tuple[StationView, ...]

    @property
    def is_filtered(self) -> bool:
        return self.time_filter != ANY_TIME

    def to_dict(self) -> Dict[str, object]:
        return {
            "time_filter": self.time_filter,
            "selected_time": self.selected_time,
            "is_filtered": self.is_filtered,
            "stations": [s.to_dict() for s in self.stations],
        }


def tooltip_text(station: Station) -> str:
    return (
        f"{station.total_traffic} trips "
        f"({station.departures} departures, {station.arrivals} arrivals)"
    )


class RecomputeController:
    """
    Owns the time-of-day selection for one map.

    Every selection re-runs filter -> aggregate -> scales over the full
    station and trip sets. The radius scale domain is taken once, here,
    from the unfiltered totals and kept for the life of the controller so
    circle sizes stay comparable while scrubbing through the day.

    Passes are serialized with a lock: at most one runs at a time.
    """

    def __init__(
        self,
        stations: List[Station],
        trips: Sequence[Trip],
        *,
        radius_scale: SqrtScale | None = None,
        flow_scale: QuantizeScale | None = None,
    ):
        self._stations = stations
        self._trips = trips
        self._lock = threading.Lock()

        if radius_scale is None:
            compute_station_traffic(self._stations, self._trips)
            max_total = max((s.total_traffic for s in self._stations), default=0)
            radius_scale = SqrtScale(domain=(0, max_total))

        self.radius_scale = radius_scale
        self.flow_scale = flow_scale or QuantizeScale()

        self._time_filter = ANY_TIME
        self._view = self._recompute(ANY_TIME)

    @property
    def time_filter(self) -> int:
        return self._time_filter

    @property
    def view(self) -> TrafficView:
        return self._view

    @property
    def trip_count(self) -> int:
        return len(self._trips)

    def select_time(self, value: int) -> TrafficView:
        """
        Apply a new selection (ANY_TIME or minutes 0..1439) and return the
        view computed for it.
        """
        if not is_valid_time_filter(value):
            raise ValueError(
                f"time filter must be {ANY_TIME} or an int in [0, 1440), got {value!r}"
            )

        with self._lock:
            view = self._recompute(value)
            self._time_filter = value
            self._view = view
        return view

    def _recompute(self, center: int) -> TrafficView:
        # always from the full trip set: filters do not stack
        trips = filter_trips_by_time(self._trips, center)
        stations = compute_station_traffic(self._stations, trips)

        views = []
        for s in stations:
            views.append(
                StationView(
                    key=s.short_name,
                    name=s.name,
                    lon=s.lon,
                    lat=s.lat,
                    arrivals=s.arrivals,
                    departures=s.departures,
                    total_traffic=s.total_traffic,
                    radius=self.radius_scale(s.total_traffic),
                    flow_bucket=self.flow_scale(flow_ratio(s.departures, s.total_traffic)),
                    tooltip_text=tooltip_text(s),
                )
            )

        return TrafficView(
            time_filter=center,
            selected_time="" if center == ANY_TIME else format_time(center),
            stations=tuple(views),
        )
