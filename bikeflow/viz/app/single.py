# bikeflow/viz/app/single.py
from __future__ import annotations

import sys
from pathlib import Path

from colorama import Fore, Style
from flask import Flask, jsonify, request

from bikeflow.traffic.controller import RecomputeController
from bikeflow.traffic.time_codec import is_valid_time_filter
from bikeflow.traffic.types import ANY_TIME
from bikeflow.util.dataset import load_dataset
from bikeflow.util.sources import DEFAULT_STATIONS_JSON, DEFAULT_TRIPS_CSV, DatasetLoadError
from bikeflow.viz.maps.render import render_map_document
from bikeflow.viz.overlays.bike_lanes import BIKE_LANE_SOURCES, load_bike_lanes


def _requested_time() -> int:
    # anything the slider could not have sent falls back to "any time"
    t = request.args.get("time", ANY_TIME, type=int)
    return t if is_valid_time_filter(t) else ANY_TIME


def create_app(
    controller: RecomputeController,
    *,
    title: str | None = None,
    bike_lanes=(),
) -> Flask:
    """
    Flask app around one controller.

      /             map page; ?time=<minutes> selects the time of day
      /api/traffic  the same view as JSON
    """
    app = Flask(__name__)

    @app.route("/")
    def _index():
        view = controller.select_time(_requested_time())
        return render_map_document(view, bike_lanes=bike_lanes, title=title)

    @app.route("/api/traffic")
    def _traffic():
        view = controller.select_time(_requested_time())
        return jsonify(view.to_dict())

    return app


def serve_traffic_map(
    *,
    stations_source: str | Path = DEFAULT_STATIONS_JSON,
    trips_source: str | Path = DEFAULT_TRIPS_CSV,
    host: str = "127.0.0.1",
    port: int = 8080,
    debug: bool = False,
    title: str | None = "Bluebikes Traffic",
    bike_lanes: bool = True,
    controller: RecomputeController | None = None,
):
    """
    Load both datasets, build the controller and serve the map.

    A dataset that fails to load stops startup with one error message.
    """
    if controller is None:
        try:
            stations, trips = load_dataset(stations_source, trips_source)
        except DatasetLoadError as e:
            print(f"{Fore.RED}Failed to load data: {e}{Style.RESET_ALL}")
            sys.exit(1)
        controller = RecomputeController(stations, trips)

    layers = load_bike_lanes(BIKE_LANE_SOURCES) if bike_lanes else []

    app = create_app(controller, title=title, bike_lanes=layers)
    print(f"{Fore.GREEN}Serving on http://{host}:{port}{Style.RESET_ALL}")
    app.run(host=host, port=int(port), debug=bool(debug))
