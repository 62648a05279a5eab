"""Tests for the seating allocator."""

import random
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.occupant import Occupant
from models.room import RoomShape
from models.errors import ConfigurationError
from engine.seating_allocator import (
    allocate,
    interleave_groups,
    partition_by_group,
    resolve_group_order,
    separation_key,
)
from engine.seating_audit import find_adjacency_conflicts, count_adjacency_conflicts
from config.defaults import UNASSIGNED_GROUP


def make_occupant(occ_id="s1", group="CS"):
    return Occupant(occ_id, group)


def make_roster(counts):
    """counts: list of (group, n). Students are listed group by group."""
    roster = []
    for group, n in counts:
        for i in range(n):
            roster.append(make_occupant(f"{group}-{i}", group))
    return roster


def mixed_roster():
    return [
        make_occupant("s1", "CS"),
        make_occupant("s2", "CS"),
        make_occupant("s3", "ME"),
        make_occupant("s4", "ME"),
    ]


def assert_plan_invariants(plan, occupants):
    seats = [(p.row, p.column) for p in plan.placements]
    assert len(seats) == len(set(seats))
    for r, c in seats:
        assert 0 <= r < plan.room.rows
        assert 0 <= c < plan.room.columns
    assert len(plan.placements) + plan.excluded_count == len(occupants)
    assert len(plan.placements) == min(len(occupants), plan.room.capacity)


class TestSeatingCases:
    def test_two_by_two_checkerboard(self):
        plan = allocate(mixed_roster(), RoomShape(2, 2))

        assert plan.excluded_count == 0
        assert len(plan.placements) == 4
        assert [c.group for c in plan.grid[0]] == ["CS", "ME"]
        assert [c.group for c in plan.grid[1]] == ["ME", "CS"]
        assert count_adjacency_conflicts(plan) == 0
        assert plan.relaxed_seats == []

    def test_conflicting_head_is_swapped_with_next_fit(self):
        plan = allocate(mixed_roster(), RoomShape(2, 2))
        seated = [(p.occupant_id, p.row, p.column) for p in plan.placements]
        # s2 is skipped at (1, 0) and takes the next seat instead
        assert seated == [("s1", 0, 0), ("s3", 0, 1), ("s4", 1, 0), ("s2", 1, 1)]

    def test_single_group_row_uses_fallback(self):
        occupants = make_roster([("CS", 4)])
        plan = allocate(occupants, RoomShape(1, 4))

        assert len(plan.placements) == 4
        assert plan.excluded_count == 0
        assert plan.relaxed_seats == [(0, 1), (0, 2), (0, 3)]
        assert count_adjacency_conflicts(plan) == 3

    def test_overflow_is_excluded_and_reported(self):
        occupants = make_roster([("CS", 6)])
        plan = allocate(occupants, RoomShape(2, 2))

        assert len(plan.placements) == 4
        assert plan.excluded_count == 2
        assert [o.id for o in plan.excluded] == ["CS-4", "CS-5"]

    def test_three_even_groups_in_eight_by_eight_have_no_conflicts(self):
        occupants = make_roster([("CS", 22), ("ME", 21), ("EE", 21)])
        plan = allocate(occupants, RoomShape(8, 8))

        assert len(plan.placements) == 64
        assert count_adjacency_conflicts(plan) == 0
        assert plan.relaxed_seats == []

    def test_two_even_groups_in_even_width_room_have_no_conflicts(self):
        occupants = make_roster([("CS", 15), ("ME", 15)])
        plan = allocate(occupants, RoomShape(5, 6))

        assert count_adjacency_conflicts(plan) == 0


class TestInvariants:
    def test_invariants_hold_across_shapes_and_mixes(self):
        mixes = [
            [("CS", 10)],
            [("CS", 30), ("ME", 3)],
            [("CS", 5), ("ME", 5), ("EE", 5), ("CE", 5)],
            [("A", 1), ("B", 40), ("C", 2)],
        ]
        shapes = [RoomShape(1, 1), RoomShape(3, 4), RoomShape(5, 5), RoomShape(2, 9)]
        for mix in mixes:
            occupants = make_roster(mix)
            for shape in shapes:
                plan = allocate(occupants, shape)
                assert_plan_invariants(plan, occupants)

    def test_conflicts_only_at_relaxed_seats(self):
        occupants = make_roster([("A", 1), ("B", 40), ("C", 2)])
        plan = allocate(occupants, RoomShape(5, 5))
        relaxed = set(plan.relaxed_seats)

        conflicts = find_adjacency_conflicts(plan)
        assert conflicts
        for a, b, _ in conflicts:
            # The later seat of each pair is recorded as relaxed
            assert max(a, b) in relaxed

    def test_empty_seats_after_occupants_run_out(self):
        plan = allocate(mixed_roster(), RoomShape(3, 3))

        empty = [(r, c) for r in range(3) for c in range(3) if not plan.grid[r][c].occupied]
        assert len(empty) == 5
        assert all(plan.grid[r][c].occupant_id is None for r, c in empty)
        assert all(plan.grid[r][c].group is None for r, c in empty)

    def test_empty_roster(self):
        plan = allocate([], RoomShape(3, 2))

        assert plan.placements == []
        assert plan.excluded_count == 0
        assert all(not cell.occupied for row in plan.grid for cell in row)
        assert len(plan.grid) == 3 and len(plan.grid[0]) == 2


class TestFeasibleMixes:
    # No group exceeds half the seats used (rounded up), so a conflict-free
    # arrangement exists for every case here.
    CASES = [
        (RoomShape(6, 6), [("CS", 12), ("ME", 12), ("EE", 12)]),
        (RoomShape(4, 4), [("CS", 5), ("ME", 5), ("EE", 6)]),
        (RoomShape(8, 8), [("CS", 22), ("ME", 21), ("EE", 21)]),
        (RoomShape(6, 6), [("CS", 18), ("ME", 18)]),
        (RoomShape(4, 6), [("CS", 8), ("ME", 8), ("EE", 8)]),
        (RoomShape(5, 5), [("CS", 9), ("ME", 8), ("EE", 8)]),
        (RoomShape(6, 6), [("CS", 7), ("ME", 7), ("EE", 6)]),
        (RoomShape(3, 8), [("CS", 8), ("ME", 8), ("EE", 8)]),
        (RoomShape(4, 4), [("CS", 4), ("ME", 4), ("EE", 4), ("CE", 4)]),
        (RoomShape(1, 7), [("CS", 4), ("ME", 3)]),
        (RoomShape(2, 6), [("CS", 4), ("ME", 4), ("EE", 4)]),
        (RoomShape(5, 6), [("CS", 15), ("ME", 15)]),
    ]

    def test_feasible_mixes_have_no_conflicts(self):
        for shape, mix in self.CASES:
            occupants = make_roster(mix)
            assert max(n for _, n in mix) <= -(-min(len(occupants), shape.capacity) // 2)

            plan = allocate(occupants, shape)

            assert_plan_invariants(plan, occupants)
            assert find_adjacency_conflicts(plan) == [], (shape, mix)
            assert plan.relaxed_seats == []

    def test_rebalancing_clears_greedy_conflicts(self):
        occupants = make_roster([("CS", 12), ("ME", 12), ("EE", 12)])

        greedy = allocate(occupants, RoomShape(6, 6), rebalance=False)
        rebalanced = allocate(occupants, RoomShape(6, 6))

        assert count_adjacency_conflicts(greedy) > 0
        assert len(greedy.relaxed_seats) == count_adjacency_conflicts(greedy)
        assert count_adjacency_conflicts(rebalanced) == 0

    def test_wider_lookahead_alone_does_not_clear_conflicts(self):
        occupants = make_roster([("CS", 12), ("ME", 12), ("EE", 12)])

        plan = allocate(occupants, RoomShape(6, 6), max_lookahead=1000, rebalance=False)
        assert count_adjacency_conflicts(plan) > 0

        plan = allocate(occupants, RoomShape(6, 6), max_lookahead=1000)
        assert count_adjacency_conflicts(plan) == 0

    def test_rebalance_keeps_greedy_plan_on_a_tie(self):
        occupants = make_roster([("CS", 6)])
        plan = allocate(occupants, RoomShape(2, 2))

        # Four of one group conflict either way, so the row-major fill stays
        assert [(p.occupant_id, p.row, p.column) for p in plan.placements] == [
            ("CS-0", 0, 0), ("CS-1", 0, 1), ("CS-2", 1, 0), ("CS-3", 1, 1),
        ]
        assert plan.relaxed_seats == [(0, 1), (1, 0), (1, 1)]

    def test_group_order_is_unchanged_by_rebalancing(self):
        occupants = make_roster([("CS", 5), ("ME", 5), ("EE", 6)])
        plan = allocate(occupants, RoomShape(4, 4))

        assert plan.group_order == ["CS", "ME", "EE"]
        assert sorted(p.occupant_id for p in plan.placements) == sorted(o.id for o in occupants)


class TestDeterminism:
    def test_same_input_same_plan(self):
        occupants = make_roster([("CS", 9), ("ME", 7), ("EE", 4)])
        assert allocate(occupants, RoomShape(4, 5)) == allocate(occupants, RoomShape(4, 5))

    def test_same_seed_same_plan(self):
        occupants = make_roster([("CS", 9), ("ME", 7), ("EE", 4)])
        first = allocate(occupants, RoomShape(4, 5), seed=7)
        second = allocate(occupants, RoomShape(4, 5), seed=7)
        assert first == second

    def test_seed_shuffles_canonical_order(self):
        keys = ["CS", "ME", "EE", "CE"]
        expected = list(keys)
        random.Random(11).shuffle(expected)
        assert resolve_group_order(keys, seed=11) == expected


class TestGroupOrder:
    def test_explicit_order_controls_first_seat(self):
        occupants = [make_occupant("s1", "CS"), make_occupant("s2", "ME")]
        plan = allocate(occupants, RoomShape(1, 2), group_order=["ME", "CS"])

        assert plan.grid[0][0].occupant_id == "s2"
        assert plan.group_order == ["ME", "CS"]

    def test_unlisted_groups_follow_first_seen(self):
        order = resolve_group_order(["CS", "ME", "EE"], group_order=["EE", "XX"])
        assert order == ["EE", "CS", "ME"]

    def test_canonical_order_is_first_seen(self):
        occupants = [make_occupant("a", "ME"), make_occupant("b", "CS"), make_occupant("c", "ME")]
        plan = allocate(occupants, RoomShape(1, 3))
        assert plan.group_order == ["ME", "CS"]


class TestHelpers:
    def test_partition_keeps_input_order(self):
        occupants = [make_occupant("a", "CS"), make_occupant("b", "ME"), make_occupant("c", "CS")]
        buckets = partition_by_group(occupants)

        assert list(buckets.keys()) == ["CS", "ME"]
        assert [o.id for o in buckets["CS"]] == ["a", "c"]

    def test_interleave_skips_exhausted_groups(self):
        occupants = make_roster([("A", 3), ("B", 1), ("C", 2)])
        buckets = partition_by_group(occupants)
        sequence = interleave_groups(buckets, ["A", "B", "C"])

        assert [o.id for o in sequence] == ["A-0", "B-0", "C-0", "A-1", "C-1", "A-2"]

    def test_unassigned_occupants_are_singleton_groups(self):
        a = make_occupant("u1", UNASSIGNED_GROUP)
        b = make_occupant("u2", UNASSIGNED_GROUP)
        assert separation_key(a) != separation_key(b)

        plan = allocate([a, b], RoomShape(1, 2))
        assert plan.relaxed_seats == []
        assert plan.group_order == [UNASSIGNED_GROUP]
        assert count_adjacency_conflicts(plan) == 0

    def test_from_record_buckets_missing_group(self):
        assert Occupant.from_record({"id": "x"}).group == UNASSIGNED_GROUP
        assert Occupant.from_record({"id": "y", "group": "  "}).group == UNASSIGNED_GROUP
        assert Occupant.from_record({"id": 7, "group": "CS"}).id == "7"


class TestLookahead:
    def test_lookahead_of_one_disables_swaps(self):
        plan = allocate(mixed_roster(), RoomShape(2, 2), max_lookahead=1, rebalance=False)

        assert plan.relaxed_seats == [(1, 0), (1, 1)]
        assert count_adjacency_conflicts(plan) == 2

    def test_invalid_lookahead(self):
        with pytest.raises(ConfigurationError):
            allocate(mixed_roster(), RoomShape(2, 2), max_lookahead=0)


class TestRoomValidation:
    def test_zero_rows(self):
        with pytest.raises(ConfigurationError):
            allocate(mixed_roster(), RoomShape(0, 4))

    def test_zero_columns(self):
        with pytest.raises(ConfigurationError):
            allocate([], RoomShape(4, 0))

    def test_negative_and_non_integer_dimensions(self):
        for shape in [RoomShape(-1, 3), RoomShape(2.5, 3), RoomShape(True, 3)]:
            with pytest.raises(ConfigurationError):
                allocate(mixed_roster(), shape)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
