from __future__ import annotations

from datetime import datetime, timedelta

from bluetraffic.trips.types import Station, Trip

DAY = datetime(2024, 3, 1)


def make_trip(start: str, end: str, start_min: int, end_min: int | None = None, day_offset: int = 0) -> Trip:
    base = DAY + timedelta(days=day_offset)
    if end_min is None:
        end_min = start_min + 10
    return Trip(
        start_station_id=start,
        end_station_id=end,
        started_at=base + timedelta(minutes=start_min),
        ended_at=base + timedelta(minutes=end_min),
    )


def make_stations(*ids: str) -> list[Station]:
    return [
        Station(id=sid, lon=-71.09 + i * 0.01, lat=42.36 + i * 0.01, name=f"Station {sid}")
        for i, sid in enumerate(ids)
    ]
