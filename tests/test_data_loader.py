"""Tests for roster/room parsing and validation."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pandas as pd
import pytest

from data.loader import parse_roster, parse_rooms, load_file, _match_sheet
from data.validator import validate_roster, validate_rooms, validate_supply
from data.sample_data import generate_roster_df, generate_rooms_df
from config.defaults import UNASSIGNED_GROUP


def make_roster_df():
    return pd.DataFrame({
        "Student ID": ["S1", "S2", "S3"],
        "Name": ["Asha", "Ben", None],
        "Department": ["CS", None, "ME"],
        "Detained": ["no", "Yes", "0"],
    })


def make_rooms_df():
    return pd.DataFrame({
        "Room ID": ["R1", "R2"],
        "Room Number": ["A-101", None],
        "Rows": [4, 3],
        "Columns": [5, 3],
        "Capacity": [20, 12],
    })


class TestParseRoster:
    def test_basic_fields(self):
        roster = parse_roster(make_roster_df())

        assert [o.id for o in roster] == ["S1", "S2", "S3"]
        assert roster[0].name == "Asha"
        assert roster[2].name == ""
        assert all(o.is_active for o in roster)

    def test_missing_department_uses_sentinel(self):
        roster = parse_roster(make_roster_df())
        assert roster[1].group == UNASSIGNED_GROUP

    def test_detained_flag(self):
        roster = parse_roster(make_roster_df())
        assert [o.is_detained for o in roster] == [False, True, False]


class TestParseRooms:
    def test_shape_and_capacity(self):
        rooms = parse_rooms(make_rooms_df())

        assert rooms[0].shape.capacity == 20
        assert rooms[0].label == "A-101"
        assert rooms[1].label == "R2"
        assert rooms[1].capacity_mismatch
        assert not rooms[0].capacity_mismatch


class TestLoadFile:
    def test_unsupported_extension(self):
        class Upload:
            name = "roster.txt"

        with pytest.raises(ValueError):
            load_file(Upload())

    def test_sheet_alias_matching(self):
        assert _match_sheet(["Exam Halls", "Students"], "rooms") == "Exam Halls"
        with pytest.raises(ValueError):
            _match_sheet(["Sheet1"], "roster")


class TestValidateRoster:
    def test_valid_with_missing_department_warning(self):
        result = validate_roster(make_roster_df())
        assert result.is_valid
        assert len(result.warnings) == 1

    def test_missing_columns(self):
        result = validate_roster(pd.DataFrame({"Student ID": ["S1"]}))
        assert not result.is_valid
        assert "Department" in result.errors[0]

    def test_duplicate_ids(self):
        df = pd.DataFrame({"Student ID": ["S1", "S1"], "Department": ["CS", "ME"]})
        result = validate_roster(df)
        assert not result.is_valid
        assert any("Duplicate" in e for e in result.errors)

    def test_blank_id(self):
        df = pd.DataFrame({"Student ID": ["S1", None], "Department": ["CS", "ME"]})
        result = validate_roster(df)
        assert not result.is_valid

    def test_empty_file(self):
        result = validate_roster(pd.DataFrame(columns=["Student ID", "Department"]))
        assert not result.is_valid


class TestValidateRooms:
    def test_capacity_mismatch_is_warning(self):
        result = validate_rooms(make_rooms_df())
        assert result.is_valid
        assert "R2" in result.warnings[0]

    def test_non_positive_dimensions(self):
        df = pd.DataFrame({"Room ID": ["R1"], "Rows": [0], "Columns": [4]})
        result = validate_rooms(df)
        assert not result.is_valid

    def test_duplicate_room_ids(self):
        df = pd.DataFrame({"Room ID": ["R1", "R1"], "Rows": [2, 2], "Columns": [2, 2]})
        assert not validate_rooms(df).is_valid

    def test_non_numeric_dimensions(self):
        df = pd.DataFrame({"Room ID": ["R1"], "Rows": ["four"], "Columns": [4]})
        assert not validate_rooms(df).is_valid

    def test_fractional_dimensions(self):
        df = pd.DataFrame({"Room ID": ["R1", "R2"], "Rows": [2.5, 3.0], "Columns": [4, 4]})
        result = validate_rooms(df)

        assert not result.is_valid
        assert "whole numbers" in result.errors[0]
        assert "['R1']" in result.errors[0]


class TestValidateSupply:
    def test_shortfall_warns(self):
        result = validate_supply(eligible_count=30, total_seats=24)
        assert result.is_valid
        assert "6 eligible student(s)" in result.warnings[0]

    def test_enough_seats(self):
        assert validate_supply(10, 24).warnings == []


class TestSampleData:
    def test_sample_roster_is_valid(self):
        df = generate_roster_df()
        assert validate_roster(df).is_valid
        assert len(df) == 168

    def test_sample_rooms_are_valid(self):
        result = validate_rooms(generate_rooms_df())
        assert result.is_valid
        assert "R202" in result.warnings[0]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
