# bluetraffic/pipeline.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from colorama import Fore, Style

from bluetraffic.errors import DataUnavailable
from bluetraffic.traffic.aggregate import compute_station_traffic
from bluetraffic.traffic.scales import derive_flow_ratio, derive_radius_scale
from bluetraffic.traffic.time_filter import (
    UNFILTERED,
    TimeFilterState,
    filter_trips,
    time_filter_state,
)
from bluetraffic.trips.types import Station, Trip
from bluetraffic.util.load_trips import load_trips
from bluetraffic.util.stations import load_stations

IDLE = "idle"
RECOMPUTING = "recomputing"


@dataclass(frozen=True)
class StationVisual:
    radius: float
    flow_ratio: float


@dataclass
class RenderPayload:
    """
    Everything the map needs for one time value.
    visuals is keyed by station id; stations carry the aggregated counts.
    """
    state: TimeFilterState
    stations: List[Station]
    visuals: Dict[str, StationVisual]
    max_traffic: int
    trip_count: int

    def to_dict(self) -> dict:
        return {
            "time": self.state.time_value,
            "maxTraffic": self.max_traffic,
            "tripCount": self.trip_count,
            "stations": {
                s.id: {
                    "radius": self.visuals[s.id].radius,
                    "flowRatio": self.visuals[s.id].flow_ratio,
                    "arrivals": s.arrivals,
                    "departures": s.departures,
                    "totalTraffic": s.total_traffic,
                }
                for s in self.stations
            },
        }


def compute_payload(
    stations: Sequence[Station],
    trips: Sequence[Trip],
    state: TimeFilterState,
) -> RenderPayload:
    """
    One update cycle: filter trips, aggregate from the raw filtered trips,
    derive both scales, build per-station visuals.
    """
    filtered = filter_trips(trips, state)
    aggregated = compute_station_traffic(stations, filtered)
    radius = derive_radius_scale(aggregated, state.active)

    visuals = {
        s.id: StationVisual(
            radius=radius(s.total_traffic),
            flow_ratio=derive_flow_ratio(s.departures, s.total_traffic),
        )
        for s in aggregated
    }

    return RenderPayload(
        state=state,
        stations=aggregated,
        visuals=visuals,
        max_traffic=radius.domain_max,
        trip_count=len(filtered),
    )


@dataclass
class TrafficPipeline:
    """
    Pipeline context: read-only stations + trips, the current filter state
    and the last payload pushed to the map.
    """
    stations: List[Station]
    trips: List[Trip]
    state: TimeFilterState = UNFILTERED
    payload: Optional[RenderPayload] = None
    status: str = IDLE

    def recompute(self, state: TimeFilterState) -> RenderPayload:
        self.status = RECOMPUTING
        try:
            payload = compute_payload(self.stations, self.trips, state)
            self.state = state
            self.payload = payload
        finally:
            self.status = IDLE
        return payload

    def update(self, time_value: int) -> RenderPayload:
        return self.recompute(time_filter_state(time_value))


def load_pipeline(stations_file: str | Path, trips_csv: str | Path) -> TrafficPipeline:
    """
    Load stations and trips, then run the initial unfiltered cycle.
    Raises DataUnavailable if either input can't be loaded.
    """
    stations = load_stations(stations_file)
    trips = load_trips(trips_csv)
    if not stations or not trips:
        raise DataUnavailable("pipeline needs both stations and trips")

    pipeline = TrafficPipeline(stations=stations, trips=trips)
    payload = pipeline.recompute(UNFILTERED)

    print(
        f"{Fore.MAGENTA}Busiest station: {payload.max_traffic} trips "
        f"across {len(stations)} stations{Style.RESET_ALL}"
    )
    return pipeline
