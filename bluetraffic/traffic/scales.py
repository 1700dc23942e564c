# bluetraffic/traffic/scales.py
from __future__ import annotations

import math
from bisect import bisect_right
from dataclasses import dataclass
from typing import Iterable, Tuple

from bluetraffic.traffic.aggregate import max_traffic
from bluetraffic.trips.types import Station

UNFILTERED_RANGE = (0.0, 25.0)
FILTERED_RANGE = (3.0, 50.0)

# departures share buckets: mostly arrivals / balanced / mostly departures
FLOW_LEVELS = (0.0, 0.5, 1.0)
FLOW_THRESHOLDS = (1 / 3, 2 / 3)


@dataclass(frozen=True)
class RadiusScale:
    """
    Square-root scale from total traffic to circle radius, so that circle
    area grows linearly with traffic. Inputs are clamped to the domain.
    """
    domain_max: int
    range: Tuple[float, float]

    def __call__(self, total_traffic: int) -> float:
        if self.domain_max <= 0:
            return 0.0

        r0, r1 = self.range
        x = min(max(total_traffic, 0), self.domain_max)
        return r0 + (r1 - r0) * math.sqrt(x) / math.sqrt(self.domain_max)


def derive_radius_scale(stations: Iterable[Station], filter_active: bool) -> RadiusScale:
    return RadiusScale(
        domain_max=max_traffic(stations),
        range=FILTERED_RANGE if filter_active else UNFILTERED_RANGE,
    )


def derive_flow_ratio(departures: int, total_traffic: int) -> float:
    ratio = departures / total_traffic if total_traffic > 0 else 0.0
    return FLOW_LEVELS[bisect_right(FLOW_THRESHOLDS, ratio)]
