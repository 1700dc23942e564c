from __future__ import annotations

import json

import pytest

from bluetraffic.errors import DataUnavailable
from bluetraffic.pipeline import IDLE, TrafficPipeline, compute_payload, load_pipeline
from bluetraffic.traffic.time_filter import UNFILTERED, Windowed
from helpers import make_stations, make_trip


def _abc_trips():
    # A: 2 departures, B: 3 arrivals, C: nothing
    return [make_trip("A", "X", 600)] * 2 + [make_trip("Y", "B", 610)] * 3


def test_end_to_end_scenario():
    payload = compute_payload(make_stations("A", "B", "C"), _abc_trips(), UNFILTERED)

    totals = {s.id: s.total_traffic for s in payload.stations}
    assert totals == {"A": 2, "B": 3, "C": 0}
    assert payload.max_traffic == 3
    assert payload.trip_count == 5

    assert payload.visuals["C"].radius == 0.0
    assert payload.visuals["B"].radius == pytest.approx(25.0)
    assert payload.visuals["A"].flow_ratio == 1.0
    assert payload.visuals["B"].flow_ratio == 0.0
    assert payload.visuals["C"].flow_ratio == 0.0


def test_windowed_uses_wider_range():
    payload = compute_payload(make_stations("A", "B", "C"), _abc_trips(), Windowed(center=600))

    assert payload.visuals["C"].radius == pytest.approx(3.0)
    assert payload.visuals["B"].radius == pytest.approx(50.0)


def test_window_drops_out_of_range_trips():
    trips = _abc_trips() + [make_trip("C", "A", 1200, 1210)]
    payload = compute_payload(make_stations("A", "B", "C"), trips, Windowed(center=600))

    totals = {s.id: s.total_traffic for s in payload.stations}
    assert totals == {"A": 2, "B": 3, "C": 0}


def test_same_state_is_idempotent():
    stations = make_stations("A", "B", "C")
    trips = _abc_trips()
    state = Windowed(center=630)

    first = compute_payload(stations, trips, state)
    second = compute_payload(stations, trips, state)

    assert first.to_dict() == second.to_dict()
    assert first.stations == second.stations


def test_pipeline_recompute_cycle():
    pipeline = TrafficPipeline(stations=make_stations("A", "B", "C"), trips=_abc_trips())
    assert pipeline.status == IDLE
    assert pipeline.payload is None

    windowed = pipeline.update(600)
    assert pipeline.state == Windowed(center=600)
    assert pipeline.payload is windowed
    assert pipeline.status == IDLE

    unfiltered = pipeline.update(-1)
    assert pipeline.state is UNFILTERED
    assert unfiltered.visuals["C"].radius == 0.0

    # going back to a window does not build on the previous counts
    again = pipeline.update(600)
    assert again.to_dict() == windowed.to_dict()


def test_payload_to_dict():
    payload = compute_payload(make_stations("A", "B", "C"), _abc_trips(), Windowed(center=600))
    d = payload.to_dict()

    assert d["time"] == 600
    assert d["maxTraffic"] == 3
    assert d["tripCount"] == 5
    assert d["stations"]["A"] == {
        "radius": pytest.approx(3 + 47 * (2 ** 0.5) / (3 ** 0.5)),
        "flowRatio": 1.0,
        "arrivals": 0,
        "departures": 2,
        "totalTraffic": 2,
    }
    json.dumps(d)


def _write_inputs(tmp_path):
    stations_file = tmp_path / "station_information.json"
    stations_file.write_text(
        json.dumps(
            {
                "data": {
                    "stations": [
                        {"short_name": "A", "name": "Alpha", "lat": 42.36, "lon": -71.09},
                        {"short_name": "B", "name": "Bravo", "lat": 42.37, "lon": -71.10},
                    ]
                }
            }
        )
    )
    trips_csv = tmp_path / "trips.csv"
    trips_csv.write_text(
        "ride_id,started_at,ended_at,start_station_id,end_station_id\n"
        "r1,2024-03-01 08:00:00,2024-03-01 08:20:00,A,B\n"
        "r2,2024-03-01 09:00:00,2024-03-01 09:15:00,A,B\n"
    )
    return stations_file, trips_csv


def test_load_pipeline_runs_initial_cycle(tmp_path):
    stations_file, trips_csv = _write_inputs(tmp_path)

    pipeline = load_pipeline(stations_file, trips_csv)

    assert pipeline.state is UNFILTERED
    assert pipeline.status == IDLE
    totals = {s.id: s.total_traffic for s in pipeline.payload.stations}
    assert totals == {"A": 2, "B": 2}


def test_load_pipeline_fails_without_trips(tmp_path):
    stations_file, _ = _write_inputs(tmp_path)

    with pytest.raises(DataUnavailable):
        load_pipeline(stations_file, tmp_path / "missing.csv")


def test_load_pipeline_fails_without_stations(tmp_path):
    _, trips_csv = _write_inputs(tmp_path)

    with pytest.raises(DataUnavailable):
        load_pipeline(tmp_path / "missing.json", trips_csv)
