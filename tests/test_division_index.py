"""Tests for position ↔ (division, slot) mapping and boundary crossing."""

import pytest

from bumps_results.division_index import (
    absolute_position,
    crew_slots,
    division_breaks,
    division_of,
    division_sizes,
    division_starts,
    locate,
    normalize,
    slot_in_division,
)
from bumps_results.errors import OutOfRangeBump

SIZES = [3, 4, 2]


class TestDivisionGeometry:
    def test_sizes_from_names(self):
        assert division_sizes([["A", "B"], ["C"]]).tolist() == [2, 1]

    def test_breaks_are_cumulative(self):
        assert division_breaks(SIZES).tolist() == [3, 7, 9]

    def test_starts(self):
        assert division_starts(SIZES).tolist() == [0, 3, 7]

    @pytest.mark.parametrize("position, division, slot", [
        (0, 0, 0),
        (2, 0, 2),
        (3, 1, 0),
        (6, 1, 3),
        (7, 2, 0),
        (8, 2, 1),
    ])
    def test_locate(self, position, division, slot):
        assert division_of(position, division_breaks(SIZES)) == division
        assert slot_in_division(position, SIZES) == slot
        assert locate(position, SIZES) == (division, slot)

    def test_absolute_position_is_one_based(self):
        assert absolute_position(0, 0, SIZES) == 1
        assert absolute_position(1, 0, SIZES) == 4
        assert absolute_position(2, 1, SIZES) == 9

    def test_crew_slots_in_race_order(self):
        assert crew_slots([2, 1]) == [(0, 0), (0, 1), (1, 0)]


class TestNormalize:
    def test_in_range_unchanged(self):
        assert normalize(1, 2, SIZES) == (1, 2)

    def test_moves_up_a_division(self):
        # Head of division 1 bumping up one lands at the bottom of division 0
        assert normalize(1, -1, SIZES) == (0, 2)

    def test_moves_down_a_division(self):
        assert normalize(0, 3, SIZES) == (1, 0)

    def test_crosses_several_divisions(self):
        assert normalize(0, 8, SIZES) == (2, 1)
        assert normalize(2, -6, SIZES) == (0, 1)

    def test_above_head_raises(self):
        with pytest.raises(OutOfRangeBump):
            normalize(0, -1, SIZES)

    def test_below_bottom_raises(self):
        with pytest.raises(OutOfRangeBump):
            normalize(2, 2, SIZES)
