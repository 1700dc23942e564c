# bluetraffic/traffic/aggregate.py
from __future__ import annotations

from dataclasses import replace
from typing import Callable, Dict, Iterable, List, Sequence

from bluetraffic.trips.types import Station, Trip


def count_by_station(trips: Iterable[Trip], key: Callable[[Trip], str]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for t in trips:
        sid = key(t)
        if not sid:
            continue
        counts[sid] = counts.get(sid, 0) + 1
    return counts


def compute_station_traffic(stations: Sequence[Station], trips: Sequence[Trip]) -> List[Station]:
    """
    Per-station departures (by start station) and arrivals (by end station).

    Returns new Station objects in the input order; the inputs are left alone.
    Trips pointing at ids that are not in `stations` count for nobody.
    """
    departures = count_by_station(trips, lambda t: t.start_station_id)
    arrivals = count_by_station(trips, lambda t: t.end_station_id)

    out = []
    for s in stations:
        a = arrivals.get(s.id, 0)
        d = departures.get(s.id, 0)
        out.append(replace(s, arrivals=a, departures=d, total_traffic=a + d))
    return out


def max_traffic(stations: Iterable[Station]) -> int:
    return max((s.total_traffic for s in stations), default=0)


def hourly_departures(trips: Iterable[Trip]) -> List[int]:
    """Trips started in each hour of the day, 24 buckets."""
    counts = [0] * 24
    for t in trips:
        counts[t.started_at.hour] += 1
    return counts
