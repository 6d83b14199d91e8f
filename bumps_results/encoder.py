"""
Notation Encoder for Bumps Results Processing

This module serializes a complete movement matrix into the compact results
notation: one line per day, one space-separated segment per division, with
divisions written bottom to top and crews within a division bottom to top.
"""

import warnings
from typing import Sequence

import numpy as np

from .errors import BumpsDataWarning


def encode_division(moves: np.ndarray, day: int = 0, division: int = 0) -> str:
    """
    Encode one division's movements for one day, bottom crew first.

    Args:
        moves: Movement values of the division's slots, top slot first.
        day: Day index, used in data-quality warnings.
        division: Division index, used in data-quality warnings.

    Returns:
        Token string for the division's own crews (without the sandwich token).
    """
    tokens = []
    crew = len(moves) - 1

    while crew >= 0:
        m = int(moves[crew])

        if m == 0:
            tokens.append("r")
            crew -= 1
        elif m == 1 and crew == 0:
            # Head crew bumped into the division above; written there.
            tokens.append("r")
            crew -= 1
        elif m == 1:
            tokens.append("u")
            crew -= 2
        elif m == 2 and crew == 1:
            tokens.append("u")
            crew -= 2
        elif m == 3:
            tokens.append("o3")
            crew -= 1
        elif m in (-1, -3):
            crew -= 1
        else:
            warnings.warn(
                f"Cannot encode move {m} on day {day}, division {division}, slot {crew}",
                BumpsDataWarning,
                stacklevel=2,
            )
            crew -= 1

    return "".join(tokens)


def bumped_across(moves: np.ndarray) -> bool:
    """Return True if the division's head crew bumped into the division above."""
    if len(moves) > 0 and moves[0] == 1:
        return True
    return len(moves) > 1 and moves[1] == 2


def encode_day(day_moves: np.ndarray, sizes: Sequence[int], day: int = 0) -> str:
    """
    Encode one day of racing.

    Args:
        day_moves: Movement matrix for the day, shape (divisions, max size).
        sizes: Number of crews in each division.
        day: Day index, used in data-quality warnings.

    Returns:
        The day's results line, terminated by a newline.
    """
    n_divisions = len(sizes)
    segments = []
    sandwich_success = False

    for division in range(n_divisions - 1, -1, -1):
        moves = day_moves[division, :sizes[division]]
        segment = ""

        # Sandwich crew from the division below opens the segment
        if division < n_divisions - 1:
            segment = "u" if sandwich_success else "r"

        segment += encode_division(moves, day, division)
        sandwich_success = bumped_across(moves)
        segments.append(segment)

    return " ".join(segments) + "\n"


def encode_results(move: np.ndarray, sizes: Sequence[int]) -> str:
    """
    Encode a full movement matrix into results notation.

    Args:
        move: Movement matrix of shape (days, divisions, max size).
        sizes: Number of crews in each division.

    Returns:
        Results text with one newline-terminated line per day.
    """
    return "".join(encode_day(move[day], sizes, day) for day in range(move.shape[0]))
