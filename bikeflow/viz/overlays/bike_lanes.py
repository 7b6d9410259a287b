# bikeflow/viz/overlays/bike_lanes.py
from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

import folium
from colorama import Fore, Style

from bikeflow.util.sources import DatasetLoadError, read_json_source

BIKE_LANE_SOURCES: Tuple[Tuple[str, str], ...] = (
    (
        "Boston bike lanes",
        "https://bostonopendata-boston.opendata.arcgis.com/datasets/boston::existing-bike-network-2022.geojson",
    ),
    (
        "Cambridge bike lanes",
        "https://raw.githubusercontent.com/cambridgegis/cambridgegis_data/main/Recreation/Bike_Facilities/RECREATION_BikeFacilities.geojson",
    ),
)

LANE_STYLE = {"color": "#32D400", "weight": 5, "opacity": 0.6}


def load_bike_lanes(sources: Sequence[Tuple[str, str]] = BIKE_LANE_SOURCES) -> List[Tuple[str, Dict]]:
    """
    Fetch bike-lane GeoJSON once. These layers are decoration: a source that
    fails is reported and left out.
    """
    layers = []
    for name, src in sources:
        try:
            layers.append((name, read_json_source(src)))
        except DatasetLoadError as e:
            print(f"{Fore.YELLOW}Skipping {name}: {e}{Style.RESET_ALL}")
    return layers


def add_bike_lanes(m, layers):
    for name, geojson in layers:
        folium.GeoJson(
            geojson,
            name=name,
            style_function=lambda _feature: dict(LANE_STYLE),
        ).add_to(m)
