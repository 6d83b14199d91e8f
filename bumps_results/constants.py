"""
Constants for Bumps Results Processing

This module defines path constants, default event header values and the
shared vocabulary of the tabular and notation formats.
"""

from pathlib import Path

# Results Data folder is one level up from bumps_results/
DATA_DIR = Path(__file__).parent.parent / "Results Data"
DATASET_SUFFIXES = (".txt", ".csv")

# Defaults for notation headers that a document leaves out
DEFAULT_SET = "Set"
DEFAULT_SHORT = "Short"
DEFAULT_GENDER = "Gender"
DEFAULT_YEAR = 1970
DEFAULT_DAYS = 4

# Events read from the tabular format carry this set name
FLAT_SET_NAME = "Town Bumps"

FLAT_COLUMNS = [
    "Year",
    "Club",
    "Sex",
    "Day",
    "Crew",
    "Start position",
    "Position",
    "Division",
]
FLAT_NUMERIC_COLUMNS = ["Year", "Day", "Start position", "Position", "Division"]

# row-over, technical (no race), bump, overbump by N, exact move by N
TOKEN_PATTERN = r"r|t|u|o[0-9]+|e-?[0-9]+"

COMMENT_PREFIX = "#"

# Division entry written for a slot with no crew
EMPTY_SLOT = "-"
