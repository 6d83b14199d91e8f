"""Data model for a single bumps event."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from . import constants


@dataclass
class Event:
    """One year of one set of races for one gender category."""
    set_name: str = constants.DEFAULT_SET       # "Town Bumps", "May Bumps"
    short_name: str = constants.DEFAULT_SHORT   # "Town", "Mays"
    gender: str = constants.DEFAULT_GENDER      # "M" / "W" / "Men" / "Women"
    year: int = constants.DEFAULT_YEAR
    days: int = constants.DEFAULT_DAYS
    divisions: List[List[Optional[str]]] = field(default_factory=list)  # crew names, top to bottom
    results: str = ""                           # notation text, one line per day
    move: Optional[np.ndarray] = None           # (days, divisions, max size) signed moves
    completed: Optional[np.ndarray] = None      # (days, divisions) raced flags
    finish: List[List[Optional[str]]] = field(default_factory=list)

    @property
    def sizes(self) -> np.ndarray:
        return np.array([len(d) for d in self.divisions], dtype=int)

    @property
    def crew_count(self) -> int:
        return int(self.sizes.sum())

    def allocate(self) -> None:
        """Create zeroed movement and completion matrices for the event's dimensions."""
        self.move, self.completed = empty_matrices(self.days, self.sizes)
        self.finish = [[None] * len(d) for d in self.divisions]


def empty_matrices(days: int, sizes: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Allocate a zeroed movement matrix and an all-false completion matrix.

    Divisions may differ in size, so the slot axis is padded to the largest
    division; slots past a division's size are never addressed.

    Args:
        days: Number of race days.
        sizes: Number of crews in each division, top division first.

    Returns:
        Tuple (move, completed) with shapes (days, n_divisions, max_size) and
        (days, n_divisions).
    """
    n_divisions = len(sizes)
    max_size = int(max(sizes)) if n_divisions else 0
    move = np.zeros((days, n_divisions, max_size), dtype=int)
    completed = np.zeros((days, n_divisions), dtype=bool)
    return move, completed
