"""
Division Index for Bumps Results Processing

This module maps race-wide positions to (division, slot) pairs and back, and
provides the single boundary-crossing routine used whenever a crew's slot is
moved past the top or bottom of its division.
"""

from typing import List, Sequence, Tuple

import numpy as np

from .errors import OutOfRangeBump


def division_sizes(divisions: Sequence[Sequence[str]]) -> np.ndarray:
    """Return the number of crews in each division, top division first."""
    return np.array([len(d) for d in divisions], dtype=int)


def division_breaks(sizes: Sequence[int]) -> np.ndarray:
    """
    Compute the exclusive end position of each division.

    Args:
        sizes: Number of crews in each division.

    Returns:
        Array where breaks[d] is the number of crews in divisions 0..d.
    """
    return np.cumsum(np.asarray(sizes, dtype=int))


def division_starts(sizes: Sequence[int]) -> np.ndarray:
    """Return the 0-based position of the first crew of each division."""
    sizes = np.asarray(sizes, dtype=int)
    return division_breaks(sizes) - sizes


def division_of(position: int, breaks: Sequence[int]) -> int:
    """
    Find the division containing a 0-based race-wide position.

    Args:
        position: 0-based position, assumed in [0, total crews).
        breaks: Output of division_breaks().

    Returns:
        Smallest division index d with position < breaks[d].
    """
    return int(np.searchsorted(breaks, position, side="right"))


def slot_in_division(position: int, sizes: Sequence[int]) -> int:
    """Return a 0-based position's slot within its own division."""
    for size in sizes:
        if position < size:
            break
        position -= size
    return int(position)


def locate(position: int, sizes: Sequence[int]) -> Tuple[int, int]:
    """Return the (division, slot) pair for a 0-based race-wide position."""
    return division_of(position, division_breaks(sizes)), slot_in_division(position, sizes)


def absolute_position(division: int, slot: int, sizes: Sequence[int]) -> int:
    """Return the 1-based race-wide position of a (division, slot) pair."""
    return int(division_starts(sizes)[division]) + slot + 1


def normalize(division: int, slot: int, sizes: Sequence[int]) -> Tuple[int, int]:
    """
    Bring a slot that has moved past a division boundary back into range.

    A negative slot borrows from the division above and a slot past the
    division's size lends to the division below, repeating until the slot
    lies inside a division.

    Args:
        division: Division index the slot was computed in.
        slot: Possibly out-of-range slot within that division.
        sizes: Number of crews in each division.

    Returns:
        Tuple (division, slot) with 0 <= slot < sizes[division].

    Raises:
        OutOfRangeBump: If the crew would leave the top or bottom of the event.
    """
    while slot < 0:
        division -= 1
        if division < 0:
            raise OutOfRangeBump("Crew moved above the head of the event", slot=slot)
        slot += int(sizes[division])

    while slot >= sizes[division]:
        slot -= int(sizes[division])
        division += 1
        if division >= len(sizes):
            raise OutOfRangeBump("Crew moved below the bottom of the event", slot=slot)

    return division, slot


def crew_slots(sizes: Sequence[int]) -> List[Tuple[int, int]]:
    """List every (division, slot) pair in race order, head crew first."""
    return [(div, slot) for div, size in enumerate(sizes) for slot in range(int(size))]
