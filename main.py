# bluetraffic/main.py

from bluetraffic.pipeline import load_pipeline
from bluetraffic.traffic.time_filter import format_time
from bluetraffic.viz.app.single import serve_traffic_map


STATIONS = "station_information.json"
TRIPS = "bluebikes-traffic-2024-03.csv"


def main():
    pipeline = load_pipeline(STATIONS, TRIPS)

    # ---- busiest stations, all day ----
    top = sorted(pipeline.payload.stations, key=lambda s: s.total_traffic, reverse=True)[:10]

    print("\nBusiest stations (any time):\n")
    for i, s in enumerate(top, 1):
        print(
            f"{i:02d}. "
            f"{s.name} | "
            f"{s.total_traffic} trips "
            f"({s.departures} out / {s.arrivals} in)"
        )

    # ---- rush hours ----
    for t in (8 * 60, 17 * 60 + 30):
        payload = pipeline.update(t)
        print(f"\nAround {format_time(t)}: {payload.trip_count} trips, busiest station {payload.max_traffic}")

    # ---- UI ----
    serve_traffic_map(
        pipeline=pipeline,
        port=8080,
        title="Bluebikes Traffic",
    )


if __name__ == "__main__":
    main()
