# bikeflow/util/sources.py
from __future__ import annotations

import json
import urllib.error
import urllib.request
from pathlib import Path
from typing import Any

DEFAULT_STATIONS_JSON = "https://dsc106.com/labs/lab07/data/bluebikes-stations.json"
DEFAULT_TRIPS_CSV = "https://dsc106.com/labs/lab07/data/bluebikes-traffic-2024-03.csv"


class DatasetLoadError(RuntimeError):
    """A stations or trips dataset could not be read or has the wrong shape."""


def is_url(source: str | Path) -> bool:
    return str(source).lower().startswith(("http://", "https://"))


def _http_get_json(url: str, timeout: int = 30) -> Any:
    req = urllib.request.Request(
        url,
        headers={"Accept": "application/json", "User-Agent": "bikeflow/0.1"},
    )
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            raw = resp.read().decode("utf-8", errors="replace")
    except urllib.error.HTTPError as e:
        raise DatasetLoadError(f"HTTP {e.code} fetching {url}") from e
    except (urllib.error.URLError, OSError) as e:
        raise DatasetLoadError(f"Could not fetch {url}: {e}") from e

    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise DatasetLoadError(f"Invalid JSON from {url}: {e}") from e


def read_json_source(source: str | Path, timeout: int = 30) -> Any:
    """
    Read JSON from a local path or an http(s) URL.
    Any failure is raised as DatasetLoadError.
    """
    if is_url(source):
        return _http_get_json(str(source), timeout=timeout)

    try:
        with open(source, encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise DatasetLoadError(f"Could not read {source}: {e}") from e
    except ValueError as e:
        raise DatasetLoadError(f"Invalid JSON in {source}: {e}") from e
