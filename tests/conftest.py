"""Shared fixtures for the bumps results tests."""

import os
import sys

import pytest

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

os.environ.setdefault("MPLBACKEND", "Agg")


# ─── Two divisions of three, two days ───────────────────────────────
#
# Day 1: X Press bump Rob Roy, Cantabs bump Champion of the Thames.
# Day 2: Cantabs bump Rob Roy as sandwich crew, Granta bump Champion.

MEN_NOTATION = """\
Set,Town Bumps
Short,Town
Gender,M
Year,2020
Days,2

Division,City 1,Rob Roy 1,X Press 1
Division,Champion of the Thames 1,Cantabs 1,Granta 1

Results
ru rur
ur urr
"""

MEN_DIVISIONS = [
    ["City 1", "Rob Roy 1", "X Press 1"],
    ["Champion of the Thames 1", "Cantabs 1", "Granta 1"],
]

MEN_FINISH = [
    ["City 1", "X Press 1", "Cantabs 1"],
    ["Rob Roy 1", "Granta 1", "Champion of the Thames 1"],
]

# move[day][division][slot]
MEN_MOVES = [
    [[0, -1, 1], [-1, 1, 0]],
    [[0, 0, -1], [1, -1, 1]],
]

MEN_TRAILS = {
    "City 1": [1, 1, 1],
    "Rob Roy 1": [2, 3, 4],
    "X Press 1": [3, 2, 2],
    "Champion of the Thames 1": [4, 5, 6],
    "Cantabs 1": [5, 4, 3],
    "Granta 1": [6, 6, 5],
}

FLAT_CSV = """\
Year,Club,Sex,Day,Crew,Start position,Position,Division
2020,City,M,1,1,1,1,1
2020,City,M,2,1,1,1,1
2020,Rob Roy,M,1,1,2,3,1
2020,Rob Roy,M,2,1,2,4,1
2020,X Press,M,1,1,3,2,1
2020,X Press,M,2,1,3,2,1
2020,Champion of the Thames,M,1,1,4,5,2
2020,Champion of the Thames,M,2,1,4,6,2
2020,Cantabs,M,1,1,5,4,2
2020,Cantabs,M,2,1,5,3,2
2020,Granta,M,1,1,6,6,2
2020,Granta,M,2,1,6,5,2
2020,City,W,1,1,1,1,1
2020,City,W,2,1,1,2,1
2020,Cantabs,W,1,1,2,3,1
2020,Cantabs,W,2,1,2,3,1
2020,Rob Roy,W,1,1,3,2,1
2020,Rob Roy,W,2,1,3,1,1
"""


@pytest.fixture
def men_notation():
    return MEN_NOTATION


@pytest.fixture
def flat_csv():
    return FLAT_CSV


@pytest.fixture
def data_dir(tmp_path):
    """A results directory holding one notation and one tabular dataset."""
    (tmp_path / "town_2020_men.txt").write_text(MEN_NOTATION, encoding="utf-8")
    (tmp_path / "town_2020.csv").write_text(FLAT_CSV, encoding="utf-8")
    return tmp_path
