from pathlib import Path

from bikeflow.traffic.types import Station
from bikeflow.util.sources import DatasetLoadError, read_json_source

REQUIRED_FIELDS = ("short_name", "name", "lon", "lat")


def parse_stations(raw):
    """
    Build Station records from a stations feed.

    Accepts either the GBFS envelope {"data": {"stations": [...]}} or a bare
    list of station dicts.
    """
    if isinstance(raw, dict):
        try:
            raw = raw["data"]["stations"]
        except (KeyError, TypeError) as e:
            raise DatasetLoadError("Stations JSON has no data.stations list") from e

    if not isinstance(raw, list):
        raise DatasetLoadError("Stations JSON must be a list of stations")

    stations = []
    seen = set()
    for i, s in enumerate(raw):
        if not isinstance(s, dict):
            raise DatasetLoadError(f"Station #{i} is not an object")

        missing = [k for k in REQUIRED_FIELDS if s.get(k) is None]
        if missing:
            raise DatasetLoadError(f"Station #{i} is missing {', '.join(missing)}")

        sid = str(s["short_name"]).strip()
        if sid in seen:
            raise DatasetLoadError(f"Duplicate station short_name {sid!r}")
        seen.add(sid)

        try:
            lon = float(s["lon"])
            lat = float(s["lat"])
        except (TypeError, ValueError) as e:
            raise DatasetLoadError(f"Station {sid!r} has non-numeric coordinates") from e

        stations.append(Station(short_name=sid, name=str(s["name"]), lon=lon, lat=lat))

    return stations


def load_stations(source: str | Path):
    """
    Load stations from a local JSON file or URL.
    Returns a list of Station with traffic fields zeroed.
    """
    return parse_stations(read_json_source(source))
