# bikeflow/util/trips.py
from __future__ import annotations

from pathlib import Path
from typing import List

import pandas as pd
from colorama import Fore, Style
from tqdm import tqdm

from bikeflow.traffic.types import Trip
from bikeflow.util.sources import DatasetLoadError

TRIP_COLUMNS = ["start_station_id", "end_station_id", "started_at", "ended_at"]


def read_trips_frame(source: str | Path) -> pd.DataFrame:
    """
    Read the trips CSV (path or URL) keeping only the columns we use.

    Station ids stay strings so they match the stations feed short_name.
    """
    try:
        df = pd.read_csv(
            source,
            usecols=TRIP_COLUMNS,
            dtype={"start_station_id": str, "end_station_id": str},
        )
    except ValueError as e:
        # usecols mismatch ends up here
        raise DatasetLoadError(f"Trips CSV {source} is missing columns: {e}") from e
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise DatasetLoadError(f"Could not read trips CSV {source}: {e}") from e

    return df


def clean_trips_frame(df: pd.DataFrame) -> pd.DataFrame:
    """
    Parse timestamps and drop rows we cannot use.

    A row whose started_at or ended_at does not parse is dropped, so it
    counts toward neither the radius domain nor any filtered pass. Rows with
    a blank station id are dropped as well.
    """
    out = pd.DataFrame()
    for col in ("start_station_id", "end_station_id"):
        out[col] = df[col].astype("string").str.strip().replace("", pd.NA)
    out["started_at"] = pd.to_datetime(df["started_at"], format="mixed", errors="coerce")
    out["ended_at"] = pd.to_datetime(df["ended_at"], format="mixed", errors="coerce")

    return out.dropna(subset=TRIP_COLUMNS)


def load_trips(source: str | Path, *, progress: bool = True) -> List[Trip]:
    print(f"{Fore.CYAN}Loading trips from {source}…{Style.RESET_ALL}")

    raw = read_trips_frame(source)
    df = clean_trips_frame(raw)

    skipped = len(raw) - len(df)
    if skipped:
        print(
            f"{Fore.YELLOW}Skipped {skipped} trip rows with bad timestamps "
            f"or station ids{Style.RESET_ALL}"
        )

    rows = zip(
        df["start_station_id"],
        df["end_station_id"],
        df["started_at"],
        df["ended_at"],
    )

    trips: List[Trip] = []
    for s0, s1, t0, t1 in tqdm(rows, total=len(df), desc="Building trips", disable=not progress):
        trips.append(
            Trip(
                start_station_id=str(s0),
                end_station_id=str(s1),
                started_at=t0.to_pydatetime(),
                ended_at=t1.to_pydatetime(),
            )
        )

    print(f"{Fore.GREEN}Loaded {len(trips):,} trips.{Style.RESET_ALL}")
    return trips
