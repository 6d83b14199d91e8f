"""
Movement Matrix Builder for Bumps Results Processing

This module derives an event's per-day movement matrix from tabular
records of each crew's position at the end of each day.
"""

import numpy as np
import pandas as pd

from . import constants
from . import division_index
from .encoder import encode_results
from .errors import FlatFormatError
from .models import Event


def crew_names(records: pd.DataFrame) -> pd.Series:
    """Return the "<Club> <Crew>" identity of each record."""
    return records["Club"].str.strip() + " " + records["Crew"].str.strip()


def infer_division_sizes(first_day: pd.DataFrame) -> np.ndarray:
    """
    Work out division sizes from the first day's records.

    Each division ends at the highest start position of its crews, which is
    the cumulative crew count when start positions are contiguous.

    Args:
        first_day: Day 1 records with integer Division and Start position.

    Returns:
        Array of division sizes, top division first.

    Raises:
        FlatFormatError: If divisions are not numbered 1..N or overlap.
    """
    numbers = sorted(first_day["Division"].unique())
    if numbers != list(range(1, len(numbers) + 1)):
        raise FlatFormatError(f"Divisions must be numbered 1 to {len(numbers)}, found {numbers}")

    last_start = first_day.groupby("Division")["Start position"].max().sort_index().to_numpy()
    breaks = np.maximum.accumulate(last_start)
    sizes = np.diff(breaks, prepend=0)

    if (sizes <= 0).any():
        raise FlatFormatError("Division start positions overlap")

    return sizes.astype(int)


def day_positions(records: pd.DataFrame, names: pd.Series) -> pd.DataFrame:
    """
    Pivot records into one row per crew and one column per day.

    Args:
        records: All records of one event, with a Name column.
        names: Crew names in starting order.

    Returns:
        DataFrame of integer positions indexed by crew name, columns sorted by day.

    Raises:
        FlatFormatError: If a crew has two records for a day, is missing a
            day, or appears only after day 1.
    """
    try:
        positions = records.pivot(index="Name", columns="Day", values="Position")
    except ValueError as exc:
        raise FlatFormatError(f"Crew listed twice on the same day: {exc}") from exc

    extra = positions.index.difference(names)
    if len(extra):
        raise FlatFormatError(f"Crews missing from day 1: {', '.join(extra)}")

    positions = positions.reindex(names).sort_index(axis=1)
    missing = positions.isna().any(axis=1)
    if missing.any():
        raise FlatFormatError(
            f"Crews missing a day of results: {', '.join(positions.index[missing])}"
        )

    return positions.astype(int)


def build_event(records: pd.DataFrame, set_name: str = constants.FLAT_SET_NAME) -> Event:
    """
    Build an event from the tabular records of one (Year, Sex) group.

    Args:
        records: Records with validated integer Year, Day, Start position,
            Position and Division columns and string Club, Crew, Sex columns.
        set_name: Name of the set of races.

    Returns:
        Event with divisions, movement, completion, finish and results filled in.

    Raises:
        FlatFormatError: If the records do not describe a consistent event.
    """
    records = records.assign(Name=crew_names(records))

    first_day = records[records["Day"] == 1].sort_values("Start position")
    if first_day.empty:
        raise FlatFormatError("No records for day 1")
    if first_day["Name"].duplicated().any() or first_day["Start position"].duplicated().any():
        raise FlatFormatError("Day 1 lists a crew or start position more than once")

    day_numbers = sorted(records["Day"].unique())
    days = len(day_numbers)
    if day_numbers != list(range(1, days + 1)):
        raise FlatFormatError(f"Race days must run from 1 to {days}, found {day_numbers}")

    sizes = infer_division_sizes(first_day)
    total = int(sizes.sum())
    positions = day_positions(records, first_day["Name"]).to_numpy()

    if positions.min() < 1 or positions.max() > total:
        raise FlatFormatError(f"Positions must lie between 1 and {total}")
    for day in range(days):
        if len(set(positions[:, day])) != len(positions):
            raise FlatFormatError(f"Two crews share a position on day {day + 1}")

    event = Event(
        set_name=set_name,
        gender=str(records["Sex"].iloc[0]),
        year=int(records["Year"].iloc[0]),
        days=days,
        divisions=[[None] * int(size) for size in sizes],
    )
    event.allocate()

    starts = division_index.division_starts(sizes)
    crews = zip(
        first_day["Name"],
        first_day["Start position"].astype(int),
        first_day["Division"].astype(int) - 1,
    )

    for crew, (name, start, div) in enumerate(crews):
        slot = start - 1 - int(starts[div])
        if not 0 <= slot < sizes[div]:
            raise FlatFormatError(f"{name} starts at {start}, outside division {div + 1}")

        event.divisions[div][slot] = name
        event.move[0, div, slot] = start - positions[crew, 0]

        for day in range(1, days):
            d, s = division_index.locate(positions[crew, day - 1] - 1, sizes)
            event.move[day, d, s] = positions[crew, day - 1] - positions[crew, day]

        d, s = division_index.locate(positions[crew, -1] - 1, sizes)
        event.finish[d][s] = name

    event.completed[:] = True
    event.results = encode_results(event.move, sizes)
    return event
