# main.py
import sys

from colorama import Fore, Style

from bikeflow.traffic.controller import RecomputeController
from bikeflow.traffic.types import ANY_TIME
from bikeflow.util.dataset import load_dataset
from bikeflow.util.sources import DEFAULT_STATIONS_JSON, DEFAULT_TRIPS_CSV, DatasetLoadError
from bikeflow.viz.app.single import serve_traffic_map

# 8:00 AM, 12:30 PM, 5:30 PM
SAMPLE_TIMES = [480, 750, 1050]
TOP_N = 5


def print_busiest(view, top_n=TOP_N):
    label = view.selected_time or "any time"
    print(f"\n{Fore.MAGENTA}Busiest stations ({label}):{Style.RESET_ALL}")

    busiest = sorted(view.stations, key=lambda s: s.total_traffic, reverse=True)[:top_n]
    for i, s in enumerate(busiest, 1):
        print(f"{i:02d}. {s.name} | {s.tooltip_text}")


def main():
    try:
        stations, trips = load_dataset(DEFAULT_STATIONS_JSON, DEFAULT_TRIPS_CSV)
    except DatasetLoadError as e:
        print(f"{Fore.RED}Failed to load data: {e}{Style.RESET_ALL}")
        sys.exit(1)

    controller = RecomputeController(stations, trips)

    for t in [ANY_TIME] + SAMPLE_TIMES:
        print_busiest(controller.select_time(t))

    # ---- UI ----
    serve_traffic_map(
        controller=controller,
        port=8080,
        title="Bluebikes Traffic",
    )


if __name__ == "__main__":
    main()
