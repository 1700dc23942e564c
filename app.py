import os

from bluetraffic.pipeline import load_pipeline
from bluetraffic.viz.app.single import serve_traffic_map

STATIONS = os.environ.get("STATIONS_JSON", "station_information.json")
TRIPS = os.environ.get("TRIPS_CSV", "bluebikes-traffic-2024-03.csv")


def main():
  pipeline = load_pipeline(STATIONS, TRIPS)

  port = int(os.environ.get("PORT", "8080"))

  serve_traffic_map(
      pipeline=pipeline,
      port=port,
      title="Bluebikes Traffic",
      host=os.environ.get("HOST", "0.0.0.0"),
  )


if __name__ == "__main__":
  main()
