# bluetraffic/util/load_trips.py
from __future__ import annotations

from pathlib import Path

import pandas as pd
from colorama import Fore, Style
from tqdm import tqdm

from bluetraffic.errors import DataUnavailable
from bluetraffic.trips.types import Trip

ID_COLUMNS = ["start_station_id", "end_station_id"]
TIME_COLUMNS = ["started_at", "ended_at"]


def load_trip_frame(trips_csv: str | Path) -> pd.DataFrame:
    """
    Loads a Bluebikes trip export with columns like:

      ride_id, rideable_type, started_at, ended_at,
      start_station_name, start_station_id, end_station_name, end_station_id, ...

    Returns a cleaned DataFrame with:
      - start_station_id (str, "" when missing)
      - end_station_id (str, "" when missing)
      - started_at (datetime)
      - ended_at (datetime)
    """
    trips_csv = Path(trips_csv)

    try:
        df = pd.read_csv(trips_csv, dtype={c: str for c in ID_COLUMNS})
    except (OSError, UnicodeDecodeError, pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise DataUnavailable(f"trip log unavailable: {trips_csv} ({e})") from e

    df.columns = [c.strip() for c in df.columns]
    missing = [c for c in ID_COLUMNS + TIME_COLUMNS if c not in df.columns]
    if missing:
        raise DataUnavailable(f"trip log {trips_csv} missing columns: {missing}")

    out = pd.DataFrame()
    for col in ID_COLUMNS:
        out[col] = df[col].fillna("").astype(str).str.strip()

    for col in TIME_COLUMNS:
        out[col] = pd.to_datetime(df[col], errors="coerce", format="mixed")

    # Drop malformed rows
    before = len(out)
    out = out.dropna(subset=TIME_COLUMNS)
    dropped = before - len(out)
    if dropped:
        print(f"{Fore.MAGENTA}Dropped {dropped} trips with bad timestamps{Style.RESET_ALL}")

    return out


def trips_from_frame(df: pd.DataFrame) -> list[Trip]:
    rows = df[ID_COLUMNS + TIME_COLUMNS].itertuples(index=False)
    return [
        Trip(
            start_station_id=r.start_station_id,
            end_station_id=r.end_station_id,
            started_at=r.started_at.to_pydatetime(),
            ended_at=r.ended_at.to_pydatetime(),
        )
        for r in tqdm(rows, total=len(df), desc="Reading trips")
    ]


def load_trips(trips_csv: str | Path) -> list[Trip]:
    print(f"{Fore.CYAN}Loading trips from {trips_csv}…{Style.RESET_ALL}")
    trips = trips_from_frame(load_trip_frame(trips_csv))
    if not trips:
        raise DataUnavailable(f"trip log is empty: {trips_csv}")

    print(f"{Fore.GREEN}Loaded {len(trips)} trips.{Style.RESET_ALL}")
    return trips
