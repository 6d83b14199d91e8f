"""Tests for reading and writing notation documents."""

import numpy as np
import pytest

from bumps_results.errors import DecodeError, NotationFormatError
from bumps_results.flat_format import read_flat_text
from bumps_results.models import Event
from bumps_results.notation_format import parse_document, read_notation, write_notation

from conftest import MEN_DIVISIONS, MEN_FINISH, MEN_MOVES, MEN_NOTATION

FLAT_HEADER = "Year,Club,Sex,Day,Crew,Start position,Position,Division\n"


class TestParseDocument:
    def test_headers(self):
        event = parse_document(MEN_NOTATION)
        assert event.set_name == "Town Bumps"
        assert event.short_name == "Town"
        assert event.gender == "M"
        assert event.year == 2020
        assert event.days == 2

    def test_divisions_and_results(self):
        event = parse_document(MEN_NOTATION)
        assert event.divisions == MEN_DIVISIONS
        assert event.results == "ru rur\nur urr"
        assert event.move is None

    def test_defaults_for_missing_headers(self):
        event = parse_document("Division,A,B\n\nResults\nrr\n")
        assert event.set_name == "Set"
        assert event.year == 1970
        assert event.days == 4
        assert event.divisions == [["A", "B"]]

    def test_header_value_may_contain_commas(self):
        assert parse_document("Set,Head of the River, Spring\n").set_name == "Head of the River, Spring"

    def test_comments_skipped(self):
        text = (
            "Days,1\n"
            "Division,A,B\n"
            "# second division added late\n"
            "Division,C\n"
            "Results\n"
            "# day one\n"
            "r rr\n"
        )
        event = parse_document(text)
        assert event.divisions == [["A", "B"], ["C"]]
        assert event.results == "r rr"

    def test_bad_year(self):
        with pytest.raises(NotationFormatError, match="Year"):
            parse_document("Year,twenty\n")

    def test_negative_days(self):
        with pytest.raises(NotationFormatError, match="Days"):
            parse_document("Days,-1\n")


class TestReadNotation:
    def test_decodes_moves_and_finish(self):
        event = read_notation(MEN_NOTATION)
        assert event.move.tolist() == MEN_MOVES
        assert event.completed.all()
        assert event.finish == MEN_FINISH

    def test_partial_results(self):
        event = read_notation(MEN_NOTATION.replace("ur urr\n", ""))
        assert event.completed.tolist() == [[True, True], [False, False]]
        assert event.finish == [
            ["City 1", "X Press 1", "Rob Roy 1"],
            ["Cantabs 1", "Champion of the Thames 1", "Granta 1"],
        ]

    def test_decode_error_propagates(self):
        with pytest.raises(DecodeError):
            read_notation("Days,1\nDivision,A,B,C\nResults\no5\n")


class TestWriteNotation:
    def test_round_trip(self):
        event = read_notation(MEN_NOTATION)
        text = write_notation(event)
        again = read_notation(text)
        assert again.divisions == event.divisions
        assert again.results == event.results
        assert again.days == 2
        assert again.move.tolist() == MEN_MOVES

    def test_layout(self):
        assert write_notation(read_notation(MEN_NOTATION)) == MEN_NOTATION.rstrip("\n")

    def test_default_days_omitted(self):
        event = Event(short_name="Mays", gender="W", year=2019,
                      divisions=[["A", "B"]], results="rr\nrr\nrr\nrr\n")
        text = write_notation(event)
        assert "Days," not in text
        assert text.startswith("Set,Set\nShort,Mays\nGender,W\nYear,2019\n\n")
        assert text.endswith("Division,A,B\n\nResults\nrr\nrr\nrr\nrr\n")

    def test_unnamed_slots_read_back(self):
        # A single crew starting third leaves the two slots above it empty
        event = read_flat_text(FLAT_HEADER + "2020,Jesus,M,1,1,3,2,1\n2020,Jesus,M,2,1,2,2,1\n")[0]
        text = write_notation(event)
        assert "Division,-,-,Jesus 1\n" in text

        again = read_notation(text)
        assert again.divisions == [[None, None, "Jesus 1"]]
        assert again.finish == event.finish == [[None, "Jesus 1", None]]
        assert np.array_equal(again.move, event.move)

    def test_empty_slot_marker_parsed(self):
        assert parse_document("Division,-,B\nDivision,C,-\n").divisions == [[None, "B"], ["C", None]]
