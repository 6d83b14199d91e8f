"""
Notation Decoder for Bumps Results Processing

This module replays a results token stream into a movement matrix (the
inverse of the encoder) and derives the finishing order from a movement
matrix.

Tokens are consumed the same way the encoder writes them: day by day, the
bottom division first, and within a division from the bottom crew up. Every
division except the bottom one has one extra slot below its last crew for
the sandwich crew, the head crew of the division below.
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from . import division_index
from .errors import (
    DecodeError, DuplicateAssignment, ExhaustedInput, OutOfRangeBump, StructuralMismatch,
)
from .models import empty_matrices
from .tokens import Token, TokenKind, tokenize


def apply_bump(day_moves: np.ndarray, sizes: Sequence[int], division: int,
               crew: int, up: int, day: int = 0) -> None:
    """
    Record a crew bumping `up` places within a division.

    Args:
        day_moves: Movement matrix for the day, modified in place.
        sizes: Number of crews in each division.
        division: Division the bump happened in.
        crew: 1-based slot of the bumping crew; sizes[division] + 1 is the
            sandwich crew from the division below.
        up: Places gained.
        day: Day index, for error context.

    Raises:
        OutOfRangeBump: If the bump reaches above the head of the division.
        DuplicateAssignment: If the bumped crew already has a result.
    """
    if crew - up < 1:
        raise OutOfRangeBump(f"Bump of {up} above the head of the division",
                             day=day, division=division, slot=crew - 1)

    target = crew - 1 - up
    if day_moves[division, target] != 0:
        raise DuplicateAssignment("Bumped crew already has a result",
                                  day=day, division=division, slot=target)

    day_moves[division, target] = -up

    if crew > sizes[division]:
        # The sandwich crew is whoever finished at the head of the division below
        below = division + 1
        for slot in range(sizes[below]):
            if slot - day_moves[below, slot] == 0:
                day_moves[below, slot] += up
                break
        else:
            raise DecodeError("No sandwich crew at the head of the division below",
                              day=day, division=below, slot=0)
    else:
        day_moves[division, crew - 1] = up


def replay_tokens(tokens: List[Token], days: int,
                  sizes: Sequence[int]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Replay tokens into fresh movement and completion matrices.

    Args:
        tokens: Output of tokenize().
        days: Number of race days declared for the event.
        sizes: Number of crews in each division, top division first.

    Returns:
        Tuple (move, completed). Days or divisions without tokens are left
        incomplete.

    Raises:
        DecodeError: On any inconsistency; no partially decoded matrix escapes.
    """
    n_divisions = len(sizes)
    move, completed = empty_matrices(days, sizes)

    if tokens and n_divisions == 0:
        raise StructuralMismatch("Results given for an event without divisions")

    day = -1
    division = 0
    crew = 0    # 1-based slot still to be resulted, 0 once the division is done

    for token in tokens:
        # Skip crews already resulted by an overbump from below
        while day >= 0 and 0 < crew <= sizes[division] and move[day, division, crew - 1] != 0:
            crew -= 1

        if crew == 0:
            if token.kind is TokenKind.TECHNICAL:
                continue

            if division == 0:
                if day + 1 == days:
                    raise ExhaustedInput(f"Results continue past the last of {days} days",
                                         day=day)
                day += 1
                division = n_divisions

            division -= 1
            crew = int(sizes[division])
            if division < n_divisions - 1:
                crew += 1   # sandwich crew

        completed[day, division] = True

        if token.kind is TokenKind.ROW_OVER:
            crew -= 1
        elif token.kind is TokenKind.BUMP_UP:
            apply_bump(move[day], sizes, division, crew, 1, day)
            crew -= 2
        elif token.kind is TokenKind.OVERBUMP:
            apply_bump(move[day], sizes, division, crew, token.value, day)
            crew -= 1
        elif token.kind is TokenKind.EXACT_MOVE:
            if crew > sizes[division]:
                move[day, division + 1, 0] += token.value
            else:
                move[day, division, crew - 1] = token.value
            crew -= 1
        elif token.kind is TokenKind.TECHNICAL:
            crew = 0

    return move, completed


def decode_moves(results: str, days: int,
                 sizes: Sequence[int]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Decode results notation text into movement and completion matrices.

    Args:
        results: Results notation text.
        days: Number of race days.
        sizes: Number of crews in each division.

    Returns:
        Tuple (move, completed) as produced by replay_tokens().

    Raises:
        MalformedToken: If the text is outside the token grammar.
        DecodeError: If the tokens are inconsistent with the event.
    """
    return replay_tokens(tokenize(results), days, sizes)


def finishing_order(divisions: List[List[str]], move: np.ndarray) -> List[List[Optional[str]]]:
    """
    Replay every crew through all days to find the finishing order.

    Args:
        divisions: Starting crew names per division, top to bottom.
        move: Movement matrix of shape (days, divisions, max size).

    Returns:
        Crew names per division in finishing order.

    Raises:
        OutOfRangeBump: If a crew is moved off the event.
    """
    sizes = division_index.division_sizes(divisions)
    finish = [[None] * int(size) for size in sizes]

    for div, slot in division_index.crew_slots(sizes):
        d, c = div, slot
        for day in range(move.shape[0]):
            d, c = division_index.normalize(d, c - int(move[day, d, c]), sizes)
        finish[d][c] = divisions[div][slot]

    return finish
