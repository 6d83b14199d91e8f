"""
Tabular Format for Bumps Results Processing

This module reads and writes the flat results table, one record per crew per
day:

    Year,Club,Sex,Day,Crew,Start position,Position,Division

Records are grouped by (Year, Sex) into one event per group.
"""

import csv
import io
from pathlib import Path
from typing import List, TextIO, Union

import pandas as pd

from . import constants
from . import movement
from . import replay
from .errors import FlatFormatError
from .models import Event


def load_records(source: Union[str, Path, TextIO]) -> pd.DataFrame:
    """
    Load and validate tabular records.

    Args:
        source: Path to a CSV file, or an open text stream.

    Returns:
        DataFrame with the tabular columns; Year, Day, Start position,
        Position and Division converted to integers.

    Raises:
        FlatFormatError: If a column or value is missing or a numeric field
            is not an integer.
    """
    try:
        df = pd.read_csv(source, dtype=str, skipinitialspace=True)
    except pd.errors.EmptyDataError as exc:
        raise FlatFormatError("No tabular results found") from exc

    df.columns = [str(col).strip() for col in df.columns]
    missing = [col for col in constants.FLAT_COLUMNS if col not in df.columns]
    if missing:
        raise FlatFormatError(f"Missing columns: {', '.join(missing)}")

    df = df[constants.FLAT_COLUMNS].copy()

    # Line numbers in messages count the header as line 1
    blank = df.isna().any(axis=1)
    if blank.any():
        lines = ", ".join(str(i + 2) for i in df.index[blank])
        raise FlatFormatError(f"Missing values on line(s) {lines}")

    for col in constants.FLAT_NUMERIC_COLUMNS:
        values = pd.to_numeric(df[col].str.strip(), errors="coerce")
        bad = values.isna() | (values % 1 != 0)
        if bad.any():
            lines = ", ".join(str(i + 2) for i in df.index[bad])
            raise FlatFormatError(f"Column {col!r} is not a whole number on line(s) {lines}")
        df[col] = values.astype(int)

    df["Sex"] = df["Sex"].str.strip()
    return df


def read_flat(source: Union[str, Path, TextIO],
              set_name: str = constants.FLAT_SET_NAME) -> List[Event]:
    """
    Read tabular results into events.

    Args:
        source: Path to a CSV file, or an open text stream.
        set_name: Name given to every event read.

    Returns:
        One event per (Year, Sex) group, in order of first appearance.

    Raises:
        FlatFormatError: If the records are missing fields or inconsistent.
    """
    df = load_records(source)

    return [
        movement.build_event(group, set_name=set_name)
        for _, group in df.groupby(["Year", "Sex"], sort=False)
    ]


def read_flat_text(text: str, set_name: str = constants.FLAT_SET_NAME) -> List[Event]:
    """Read tabular results held in a string."""
    return read_flat(io.StringIO(text), set_name=set_name)


def write_flat(events: List[Event]) -> str:
    """
    Write events as tabular results.

    Args:
        events: Events with movement and completion matrices.

    Returns:
        CSV text with a header row and one row per crew per raced day.
    """
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=constants.FLAT_COLUMNS, lineterminator="\n")
    writer.writeheader()

    for event in events:
        writer.writerows(replay.flat_records(event))

    return buffer.getvalue()
