"""
Export Functions for Bumps Results Processing

This module provides functions to export events to the tabular and notation
formats, and position trails to CSV for external charting.
"""

import csv
import io
from typing import Dict, List

from . import flat_format
from . import notation_format
from .models import Event


def select_event(events: List[Event], index: int) -> Event:
    """
    Pick one event from a loaded dataset.

    Raises:
        ValueError: If index does not name an event.
    """
    if not 0 <= index < len(events):
        raise ValueError(f"Event {index} not found")
    return events[index]


def export_flat_csv(events: List[Event]) -> str:
    """Export events as tabular results CSV."""
    return flat_format.write_flat(events)


def export_event_notation(events: List[Event], index: int) -> str:
    """
    Export one event as a notation document.

    Args:
        events: Events loaded from a dataset.
        index: Index of the event to export (0-indexed).

    Returns:
        Notation document text.

    Raises:
        ValueError: If index is not found.
    """
    return notation_format.write_notation(select_event(events, index))


def export_trails_csv(payload: Dict) -> str:
    """
    Export an event's position trails as CSV.

    Args:
        payload: Event payload from build_event_payload().

    Returns:
        CSV string with one row per crew: name, the position after each day
        (day 0 is the start order), and blades/spoons flags. Days a crew has
        not raced yet are left empty.
    """
    days = payload["days"]

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")

    # Write header
    writer.writerow(["crew"] + [f"day_{day}" for day in range(days + 1)] + ["blades", "spoons"])

    # Write data rows
    for crew in payload["crews"]:
        positions = {value["day"]: value["pos"] for value in crew["values"]}
        writer.writerow(
            [crew["name"]]
            + [positions.get(day, "") for day in range(days + 1)]
            + [int(crew["blades"]), int(crew["spoons"])]
        )

    return buffer.getvalue()
