"""
Notation Format for Bumps Results Processing

This module reads and writes results notation documents:

    Set,Town Bumps
    Short,Town
    Gender,M
    Year,2020
    Days,4                      (omitted when 4)

    Division,Crew A,Crew B,...  (one line per division, top first)
    Division,...

    Results
    rrur urrr                   (one line per day, bottom division first)

Lines starting with '#' inside the Division or Results blocks are comments.
A '-' in a Division line marks a slot with no crew.
"""

from typing import List, Optional

from . import constants
from . import decoder
from .errors import NotationFormatError
from .models import Event

TEXT_HEADERS = {
    "Set": "set_name",
    "Short": "short_name",
    "Gender": "gender",
}
INT_HEADERS = {
    "Year": "year",
    "Days": "days",
}


def parse_int_header(key: str, value: str) -> int:
    """Parse an integer header value, raising NotationFormatError if invalid."""
    try:
        number = int(value.strip())
    except ValueError as exc:
        raise NotationFormatError(f"{key} must be a whole number, got {value!r}") from exc
    if number < 0:
        raise NotationFormatError(f"{key} must not be negative, got {number}")
    return number


def crew_entry(field: str) -> Optional[str]:
    """Return the crew named by a Division field, or None for an empty slot."""
    return None if field.strip() == constants.EMPTY_SLOT else field


def parse_document(text: str) -> Event:
    """
    Parse a notation document's headers, divisions and results text.

    The returned event has no movement data; see read_notation().

    Args:
        text: Notation document.

    Returns:
        Event with header fields, divisions and results filled in.

    Raises:
        NotationFormatError: If Year or Days is not a whole number.
    """
    event = Event()
    divisions: List[List[Optional[str]]] = []
    current: List[Optional[str]] = []
    results: List[str] = []
    block = None

    for line in text.splitlines():
        fields = line.split(",")
        key = fields[0]

        if key in TEXT_HEADERS:
            value = line.split(",", 1)[1] if len(fields) > 1 else ""
            setattr(event, TEXT_HEADERS[key], value)
        elif key in INT_HEADERS:
            value = fields[1] if len(fields) > 1 else ""
            setattr(event, INT_HEADERS[key], parse_int_header(key, value))
        elif key == "Division":
            block = "division"
            if current:
                divisions.append(current)
                current = []
            current.extend(crew_entry(f) for f in fields[1:] if f)
        elif key == "Results":
            block = "results"
            if current:
                divisions.append(current)
                current = []
            results.extend(f for f in fields[1:] if not f.startswith(constants.COMMENT_PREFIX))
        elif line.lstrip().startswith(constants.COMMENT_PREFIX):
            continue
        elif block == "results":
            results.extend(f for f in fields if not f.startswith(constants.COMMENT_PREFIX))
        elif block == "division":
            current.extend(crew_entry(f) for f in fields if f)

    if current:
        divisions.append(current)

    event.divisions = divisions
    event.results = "\n".join(r.strip() for r in results if r.strip())
    return event


def read_notation(text: str) -> Event:
    """
    Read a notation document and decode its results.

    Args:
        text: Notation document.

    Returns:
        Event with movement, completion and finishing order filled in.

    Raises:
        NotationFormatError: If a header is invalid.
        DecodeError: If the results cannot be replayed against the divisions.
    """
    event = parse_document(text)

    move, completed = decoder.decode_moves(event.results, event.days, event.sizes)
    finish = decoder.finishing_order(event.divisions, move)

    event.move, event.completed, event.finish = move, completed, finish
    return event


def write_notation(event: Event) -> str:
    """
    Write an event as a notation document.

    Args:
        event: Event with header fields, divisions and results text.

    Returns:
        Notation document text; the results text is copied verbatim.
    """
    lines = [
        f"Set,{event.set_name}",
        f"Short,{event.short_name}",
        f"Gender,{event.gender}",
        f"Year,{event.year}",
    ]
    if event.days != constants.DEFAULT_DAYS:
        lines.append(f"Days,{event.days}")
    lines.append("")

    for division in event.divisions:
        lines.append(",".join(["Division"] + [name or constants.EMPTY_SLOT for name in division]))

    lines.append("")
    lines.append("Results")
    return "\n".join(lines) + "\n" + event.results
