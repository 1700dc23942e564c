# bluetraffic/traffic/time_filter.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence, Union

from bluetraffic.trips.types import Trip

WINDOW_MINUTES = 60
MINUTES_PER_DAY = 1440
ANY_TIME = -1


@dataclass(frozen=True)
class Unfiltered:
    active = False

    @property
    def time_value(self) -> int:
        return ANY_TIME


@dataclass(frozen=True)
class Windowed:
    center: int
    window: int = WINDOW_MINUTES
    active = True

    def __post_init__(self):
        if not 0 <= self.center < MINUTES_PER_DAY:
            raise ValueError(f"center must be in [0, {MINUTES_PER_DAY - 1}], got {self.center}")
        if self.window < 0:
            raise ValueError("window must be >= 0")

    @property
    def time_value(self) -> int:
        return self.center


TimeFilterState = Union[Unfiltered, Windowed]

UNFILTERED = Unfiltered()


def time_filter_state(value: int, *, window: int = WINDOW_MINUTES) -> TimeFilterState:
    """
    Map the slider value to a filter state.
    -1 means any time, 0..1439 is the window center in minutes since midnight.
    """
    value = int(value)
    if value == ANY_TIME:
        return UNFILTERED
    return Windowed(center=value, window=window)


def minutes_since_midnight(dt: datetime) -> int:
    return dt.hour * 60 + dt.minute


def format_time(minutes: int) -> str:
    """12-hour clock label, e.g. 570 -> '9:30 AM'."""
    h, m = divmod(int(minutes) % MINUTES_PER_DAY, 60)
    suffix = "AM" if h < 12 else "PM"
    return f"{(h % 12) or 12}:{m:02d} {suffix}"


def filter_trips(trips: Sequence[Trip], state: TimeFilterState) -> Sequence[Trip]:
    """
    Trips that start OR end within `window` minutes of the center.
    Unfiltered returns the input itself.
    """
    if not state.active:
        return trips

    center = state.center
    window = state.window
    return [
        t
        for t in trips
        if abs(minutes_since_midnight(t.started_at) - center) <= window
        or abs(minutes_since_midnight(t.ended_at) - center) <= window
    ]
