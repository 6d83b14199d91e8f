"""
Replay and Presentation for Bumps Results Processing

This module walks an event's movement matrix to produce per-crew position
trails (for charting and blades/spoons detection) and the per-crew-per-day
records of the tabular format.
"""

import sys
from typing import Dict, List, Optional, Sequence, Tuple

from . import division_index
from .errors import StructuralMismatch
from .models import Event


def check_dimensions(event: Event) -> None:
    """
    Verify the event's matrices match its declared days and divisions.

    Raises:
        StructuralMismatch: If the completion or movement data disagree with
            the declared day count or division sizes.
    """
    if event.completed is None or event.move is None:
        raise StructuralMismatch("Event has no movement data")

    if event.completed.shape[0] != event.days:
        raise StructuralMismatch(
            f"Expected {event.days} but found {event.completed.shape[0]} completed days"
        )

    n_divisions = len(event.divisions)
    if event.completed.shape[1] != n_divisions or event.move.shape[:2] != (event.days, n_divisions):
        raise StructuralMismatch(
            f"Expected {event.days} days of {n_divisions} divisions "
            f"but movement data has shape {event.move.shape}"
        )


def position_trail(event: Event, division: int, slot: int) -> List[Tuple[int, int]]:
    """
    Follow one crew through the event.

    The walk stops at the first day on which the crew's division has not
    raced yet, so partially-known results give a partial trail.

    Args:
        event: Event with movement and completion matrices.
        division: Crew's starting division.
        slot: Crew's starting slot within the division.

    Returns:
        List of (day, position) points with 1-based race-wide positions;
        day 0 is the starting order.
    """
    sizes = event.sizes
    points = [(0, division_index.absolute_position(division, slot, sizes))]

    d, c = division, slot
    for day in range(event.days):
        if not event.completed[day, d]:
            break
        d, c = division_index.normalize(d, c - int(event.move[day, d, c]), sizes)
        points.append((day + 1, division_index.absolute_position(d, c, sizes)))

    return points


def is_blades(positions: Sequence[int]) -> bool:
    """
    Return True if the crew went up every day.

    A crew already at the head (position 1) keeps blades by rowing over.
    """
    for prev, curr in zip(positions, positions[1:]):
        if curr - prev >= 0 and curr != 1:
            return False
    return True


def is_spoons(positions: Sequence[int], bottom_position: Optional[int] = None) -> bool:
    """
    Return True if the crew went down every day.

    Args:
        positions: The crew's 1-based positions, day by day.
        bottom_position: Last position in the event; a crew there keeps
            spoons by rowing over. Unbounded when None.
    """
    if bottom_position is None:
        bottom_position = sys.maxsize

    for prev, curr in zip(positions, positions[1:]):
        if curr - prev <= 0 and curr != bottom_position:
            return False
    return True


def transform_event(event: Event) -> Dict:
    """
    Build position trails for every crew in an event.

    Args:
        event: Event with movement and completion matrices.

    Returns:
        Dictionary with:
        - year: Event year
        - crews: List of {name, values: [{day, pos}], blades, spoons}, in
          starting order
        - divisions: List of {start, length} with 1-based start positions

    Raises:
        StructuralMismatch: If the declared days disagree with the completion data.
    """
    check_dimensions(event)

    sizes = event.sizes
    starts = division_index.division_starts(sizes)
    bottom = event.crew_count

    crews = []
    for div, slot in division_index.crew_slots(sizes):
        trail = position_trail(event, div, slot)
        positions = [pos for _, pos in trail]
        crews.append({
            "name": event.divisions[div][slot],
            "values": [{"day": day, "pos": pos} for day, pos in trail],
            "blades": is_blades(positions),
            "spoons": is_spoons(positions, bottom),
        })

    divisions = [
        {"start": int(start) + 1, "length": int(size)}
        for start, size in zip(starts, sizes)
    ]

    return {"year": event.year, "crews": crews, "divisions": divisions}


def split_crew_name(name: str) -> Tuple[str, str]:
    """Split "Club Name 2" into ("Club Name", "2")."""
    club, _, number = name.rpartition(" ")
    return club, number


def flat_records(event: Event) -> List[Dict]:
    """
    Re-emit an event as tabular records, one per crew per raced day.

    Args:
        event: Event with movement and completion matrices.

    Returns:
        List of dictionaries keyed by the tabular column names, grouped by
        crew in starting order and ordered by day within a crew.
    """
    check_dimensions(event)

    records = []
    for div, slot in division_index.crew_slots(event.sizes):
        name = event.divisions[div][slot]
        if name is None:
            continue

        club, number = split_crew_name(name)
        trail = position_trail(event, div, slot)
        start_position = trail[0][1]

        for day, position in trail[1:]:
            records.append({
                "Year": event.year,
                "Club": club,
                "Sex": event.gender,
                "Day": day,
                "Crew": number,
                "Start position": start_position,
                "Position": position,
                "Division": div + 1,
            })

    return records
