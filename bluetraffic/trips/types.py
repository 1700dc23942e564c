# bluetraffic/trips/types.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Trip:
    start_station_id: str
    end_station_id: str
    started_at: datetime
    ended_at: datetime


@dataclass
class Station:
    id: str
    lon: float
    lat: float
    name: str
    arrivals: int = 0
    departures: int = 0
    total_traffic: int = 0
