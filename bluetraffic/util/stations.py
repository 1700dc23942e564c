# bluetraffic/util/stations.py
from __future__ import annotations

import json
from pathlib import Path

from colorama import Fore, Style

from bluetraffic.errors import DataUnavailable
from bluetraffic.trips.types import Station


def load_stations(path: str | Path) -> list[Station]:
    """
    Load Bluebikes stations from a GBFS station_information.json.

    Stations are keyed by short_name, which is the id the trip log uses.
    Entries without a short_name or coordinates are skipped.
    """
    path = Path(path)
    print(f"{Fore.CYAN}Loading station registry from {path}…{Style.RESET_ALL}")

    try:
        with open(path) as f:
            raw = json.load(f)["data"]["stations"]
    except (OSError, ValueError, KeyError, TypeError) as e:
        raise DataUnavailable(f"station list unavailable: {path} ({e})") from e

    stations = []
    seen = set()
    for s in raw:
        if not isinstance(s, dict):
            continue
        sid = str(s.get("short_name") or "").strip()
        if not sid or sid in seen:
            continue
        try:
            lat = float(s["lat"])
            lon = float(s["lon"])
        except (KeyError, TypeError, ValueError):
            continue

        seen.add(sid)
        stations.append(
            Station(
                id=sid,
                lon=lon,
                lat=lat,
                name=str(s.get("name", sid)),
            )
        )

    if not stations:
        raise DataUnavailable(f"station list is empty: {path}")

    print(f"{Fore.GREEN}Loaded {len(stations)} stations.{Style.RESET_ALL}")
    return stations
