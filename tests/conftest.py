from __future__ import annotations

from datetime import datetime
from typing import List

import pytest

from bikeflow.traffic.types import Station, Trip

DAY = datetime(2024, 3, 1)


def at(hour: int, minute: int, second: int = 0) -> datetime:
    return DAY.replace(hour=hour, minute=minute, second=second)


def make_trip(start: str, end: str, started_at: datetime, ended_at: datetime) -> Trip:
    return Trip(
        start_station_id=start,
        end_station_id=end,
        started_at=started_at,
        ended_at=ended_at,
    )


@pytest.fixture
def stations() -> List[Station]:
    return [
        Station(short_name="A", name="Alpha Sq", lon=-71.10, lat=42.36),
        Station(short_name="B", name="Beta St", lon=-71.09, lat=42.37),
    ]


@pytest.fixture
def trips() -> List[Trip]:
    return [
        make_trip("A", "B", at(8, 0), at(8, 10)),
        make_trip("B", "A", at(8, 5), at(8, 20)),
    ]
