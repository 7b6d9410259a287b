# bikeflow/util/dataset.py
from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from colorama import Fore, Style

from bikeflow.traffic.types import Station, Trip
from bikeflow.util.sources import DatasetLoadError
from bikeflow.util.stations import load_stations
from bikeflow.util.trips import load_trips


def load_dataset(
    stations_source: str | Path,
    trips_source: str | Path,
    *,
    progress: bool = True,
) -> Tuple[List[Station], List[Trip]]:
    """
    Load both datasets up front.

    Either one failing raises DatasetLoadError; nothing partial is returned.
    """
    print(f"{Fore.CYAN}Loading stations from {stations_source}…{Style.RESET_ALL}")
    stations = load_stations(stations_source)
    if not stations:
        raise DatasetLoadError(f"No stations found in {stations_source}")
    print(f"{Fore.GREEN}Loaded {len(stations)} stations.{Style.RESET_ALL}")

    trips = load_trips(trips_source, progress=progress)

    return stations, trips
