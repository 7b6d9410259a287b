import os

from bikeflow.util.sources import DEFAULT_STATIONS_JSON, DEFAULT_TRIPS_CSV
from bikeflow.viz.app.single import serve_traffic_map

STATIONS = os.environ.get("STATIONS_JSON", DEFAULT_STATIONS_JSON)
TRIPS = os.environ.get("TRIPS_CSV", DEFAULT_TRIPS_CSV)


def main():
  port = int(os.environ.get("PORT", "8080"))
  bike_lanes = os.environ.get("BIKE_LANES", "1") != "0"

  serve_traffic_map(
      stations_source=STATIONS,
      trips_source=TRIPS,
      host=os.environ.get("HOST", "0.0.0.0"),  # IMPORTANT for Render
      port=port,
      title="Bluebikes Traffic",
      bike_lanes=bike_lanes,
  )


if __name__ == "__main__":
  main()
