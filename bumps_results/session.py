"""
Session Builder for Bumps Results Processing

This module loads a results file in either format and builds the
JSON-serializable payloads served by the web app and used for charting.
"""

from pathlib import Path
from typing import Dict, List

from . import flat_format
from . import notation_format
from . import replay
from .models import Event


def load_events(data_file: Path) -> List[Event]:
    """
    Load every event from a results file.

    Files ending in .csv are read as tabular results (one event per year and
    gender); anything else is read as a single notation document.

    Args:
        data_file: Path to the results file.

    Returns:
        List of decoded events.

    Raises:
        FileNotFoundError: If the file does not exist.
        BumpsError: If the file's contents are not a valid event.
    """
    data_file = Path(data_file)
    if not data_file.exists():
        raise FileNotFoundError(f"Results file not found: {data_file}")

    if data_file.suffix.lower() == ".csv":
        return flat_format.read_flat(data_file)

    text = data_file.read_text(encoding="utf-8")
    return [notation_format.read_notation(text)]


def summarize_event(event: Event, index: int) -> Dict:
    """Return the header fields and dimensions of an event."""
    return {
        "index": index,
        "set": event.set_name,
        "short": event.short_name,
        "gender": event.gender,
        "year": event.year,
        "days": event.days,
        "divisions": len(event.divisions),
        "crews": event.crew_count,
    }


def build_event_payload(event: Event) -> Dict:
    """
    Build the complete payload for one event.

    Args:
        event: Decoded event.

    Returns:
        Dictionary containing:
        - set, short, gender, year, days: header fields
        - divisions: List of {start, length} division extents
        - crews: Per-crew position trails with blades/spoons flags
        - finish: Crew names per division in finishing order
        - completed: Per-day, per-division raced flags
        - results: Results notation text

    Raises:
        StructuralMismatch: If the event's matrices disagree with its header.
    """
    trails = replay.transform_event(event)

    return {
        "set": event.set_name,
        "short": event.short_name,
        "gender": event.gender,
        "year": event.year,
        "days": event.days,
        "divisions": trails["divisions"],
        "crews": trails["crews"],
        "finish": event.finish,
        "completed": event.completed.tolist(),
        "results": event.results,
    }
