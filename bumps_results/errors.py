"""
Errors for Bumps Results Processing

All structural problems found while reading, building, decoding or replaying
an event are raised as subclasses of BumpsError. Decoder errors carry the
0-based day/division/slot at which replay stopped.
"""

from typing import Optional


class BumpsError(ValueError):
    """Base class for every fatal problem with an event's results."""


class StructuralMismatch(BumpsError):
    """Declared event dimensions disagree with the supplied data."""


class FlatFormatError(BumpsError):
    """Tabular results are missing fields or hold inconsistent positions."""


class NotationFormatError(BumpsError):
    """A notation document header could not be parsed."""


class DecodeError(BumpsError):
    """
    Failure while replaying a results token stream.
    
    Args:
        message: Description of the failure.
        day: Day index (0-based) being replayed, if known.
        division: Division index (0-based, 0 is the top division), if known.
        slot: Slot index (0-based) within the division, if known.
    """

    def __init__(self, message: str, day: Optional[int] = None,
                 division: Optional[int] = None, slot: Optional[int] = None):
        self.day = day
        self.division = division
        self.slot = slot

        context = [
            f"{label} {value}"
            for label, value in (("day", day), ("division", division), ("slot", slot))
            if value is not None
        ]
        if context:
            message = f"{message} ({', '.join(context)})"
        super().__init__(message)


class DuplicateAssignment(DecodeError):
    """A bump targets a crew that already has a result for the day."""


class OutOfRangeBump(DecodeError):
    """A bump would move a crew above the top of its division or the event."""


class ExhaustedInput(DecodeError):
    """Results remain after every declared day has been raced."""


class MalformedToken(DecodeError):
    """Results text contains characters outside the token grammar."""

    def __init__(self, message: str, offset: int):
        self.offset = offset
        super().__init__(f"{message} at offset {offset}")


class BumpsDataWarning(UserWarning):
    """Non-fatal data-quality issue, such as an unencodable movement value."""
