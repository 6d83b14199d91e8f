"""
Bumps Results Module

This module converts bumps race results between the tabular and notation
formats, replays movement matrices into standings and position trails, and
builds payloads and charts for presentation.

This file serves as a single import point that re-exports the public
functions of the individual modules.
"""

# Import constants
from .constants import DATA_DIR, DATASET_SUFFIXES, DEFAULT_DAYS, FLAT_COLUMNS

# Import errors
from .errors import (
    BumpsError,
    StructuralMismatch,
    FlatFormatError,
    NotationFormatError,
    DecodeError,
    DuplicateAssignment,
    OutOfRangeBump,
    ExhaustedInput,
    MalformedToken,
    BumpsDataWarning,
)

# Import model
from .models import Event, empty_matrices

# Import division index functions
from .division_index import (
    division_sizes,
    division_breaks,
    division_starts,
    division_of,
    slot_in_division,
    absolute_position,
    normalize,
)

# Import notation functions
from .tokens import Token, TokenKind, tokenize
from .encoder import encode_results
from .decoder import decode_moves, finishing_order

# Import replay functions
from .replay import (
    position_trail,
    transform_event,
    is_blades,
    is_spoons,
    flat_records,
)

# Import format functions
from .flat_format import read_flat, read_flat_text, write_flat
from .notation_format import read_notation, write_notation

# Import session, export and chart functions
from .session import load_events, summarize_event, build_event_payload
from .export import select_event, export_flat_csv, export_event_notation, export_trails_csv
from .chart import plot_position_trails

__all__ = [
    # Constants
    "DATA_DIR",
    "DATASET_SUFFIXES",
    "DEFAULT_DAYS",
    "FLAT_COLUMNS",
    # Errors
    "BumpsError",
    "StructuralMismatch",
    "FlatFormatError",
    "NotationFormatError",
    "DecodeError",
    "DuplicateAssignment",
    "OutOfRangeBump",
    "ExhaustedInput",
    "MalformedToken",
    "BumpsDataWarning",
    # Model
    "Event",
    "empty_matrices",
    # Division index
    "division_sizes",
    "division_breaks",
    "division_starts",
    "division_of",
    "slot_in_division",
    "absolute_position",
    "normalize",
    # Notation
    "Token",
    "TokenKind",
    "tokenize",
    "encode_results",
    "decode_moves",
    "finishing_order",
    # Replay
    "position_trail",
    "transform_event",
    "is_blades",
    "is_spoons",
    "flat_records",
    # Formats
    "read_flat",
    "read_flat_text",
    "write_flat",
    "read_notation",
    "write_notation",
    # Session, export, chart
    "load_events",
    "summarize_event",
    "build_event_payload",
    "select_event",
    "export_flat_csv",
    "export_event_notation",
    "export_trails_csv",
    "plot_position_trails",
]
