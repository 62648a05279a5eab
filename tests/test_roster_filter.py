"""Tests for roster eligibility filtering."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.occupant import Occupant
from engine.roster_filter import filter_eligible


def make_occupant(occ_id, active=True, detained=False):
    return Occupant(occ_id, "CS", is_active=active, is_detained=detained)


class TestFilterEligible:
    def test_detained_and_inactive_removed(self):
        roster = [
            make_occupant("a"),
            make_occupant("b", detained=True),
            make_occupant("c", active=False),
            make_occupant("d"),
        ]
        result = filter_eligible(roster)

        assert [o.id for o in result.eligible] == ["a", "d"]
        assert [o.id for o in result.detained] == ["b"]
        assert [o.id for o in result.inactive] == ["c"]
        assert result.total == 4

    def test_detained_takes_precedence_over_inactive(self):
        result = filter_eligible([make_occupant("x", active=False, detained=True)])
        assert len(result.detained) == 1
        assert result.inactive == []

    def test_duplicate_ids_keep_first(self):
        first = Occupant("a", "CS")
        again = Occupant("a", "ME")
        result = filter_eligible([first, again])

        assert result.eligible == [first]
        assert result.duplicates == [again]

    def test_empty_roster(self):
        result = filter_eligible([])
        assert result.eligible == []
        assert result.total == 0
