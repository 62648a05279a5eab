"""Exam seating allocator — round-robin interleaving with adjacency separation."""

import logging
import random
from typing import Dict, Hashable, List, Optional, Set, Tuple

from models.occupant import Occupant
from models.room import RoomShape
from models.seating import Cell, Placement, SeatingPlan
from models.errors import ConfigurationError
from config.defaults import UNASSIGNED_GROUP, MIN_LOOKAHEAD

logger = logging.getLogger(__name__)

Seat = Tuple[int, int]

NEIGHBOR_OFFSETS = [(-1, 0), (1, 0), (0, -1), (0, 1)]


def separation_key(occupant: Occupant) -> Hashable:
    """Key compared between neighbouring seats.

    Occupants without a group each form their own singleton group.
    """
    if occupant.group == UNASSIGNED_GROUP:
        return (UNASSIGNED_GROUP, occupant.id)
    return occupant.group


def validate_room_shape(room: RoomShape):
    for name in ("rows", "columns"):
        value = getattr(room, name)
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ConfigurationError(
                f"Room {name} must be a positive integer, got {value!r}"
            )


def partition_by_group(occupants: List[Occupant]) -> Dict[Hashable, List[Occupant]]:
    """Bucket occupants by separation key, keeping first-appearance order."""
    buckets: Dict[Hashable, List[Occupant]] = {}
    for occ in occupants:
        buckets.setdefault(separation_key(occ), []).append(occ)
    return buckets


def resolve_group_order(
    keys: List[Hashable],
    group_order: Optional[List[str]] = None,
    seed: Optional[int] = None,
) -> List[Hashable]:
    """Decide the rotation order of groups.

    ``keys`` is the canonical first-appearance order. An explicit
    ``group_order`` puts its listed groups first; anything unlisted follows
    canonically. A ``seed`` shuffles the canonical order reproducibly.
    """
    if group_order is not None:
        listed = [g for g in dict.fromkeys(group_order) if g in keys]
        return listed + [k for k in keys if k not in listed]
    ordered = list(keys)
    if seed is not None:
        random.Random(seed).shuffle(ordered)
    return ordered


def interleave_groups(
    buckets: Dict[Hashable, List[Occupant]],
    order: List[Hashable],
) -> List[Occupant]:
    """Take one occupant per group in rotation, skipping exhausted groups."""
    queues = [list(buckets[k]) for k in order]
    sequence: List[Occupant] = []
    depth = 0
    longest = max((len(q) for q in queues), default=0)
    while depth < longest:
        for q in queues:
            if depth < len(q):
                sequence.append(q[depth])
        depth += 1
    return sequence


def _neighbor_keys(
    seat_keys: List[List[Optional[Hashable]]],
    room: RoomShape,
    row: int,
    column: int,
) -> Set[Hashable]:
    keys = set()
    for dr, dc in NEIGHBOR_OFFSETS:
        r, c = row + dr, column + dc
        if room.in_bounds(r, c) and seat_keys[r][c] is not None:
            keys.add(seat_keys[r][c])
    return keys


def _fill_greedy(
    queue: List[Occupant],
    room: RoomShape,
    lookahead: int,
) -> Dict[Seat, Occupant]:
    """Row-major fill taking the first queued occupant that fits each seat."""
    queue = list(queue)
    seat_keys: List[List[Optional[Hashable]]] = [
        [None] * room.columns for _ in range(room.rows)
    ]
    seated: Dict[Seat, Occupant] = {}

    for row in range(room.rows):
        for column in range(room.columns):
            if not queue:
                return seated
            blocked = _neighbor_keys(seat_keys, room, row, column)

            pick = None
            for idx, candidate in enumerate(queue[:lookahead]):
                if separation_key(candidate) not in blocked:
                    pick = idx
                    break
            if pick is None:
                pick = 0
                logger.debug(
                    "Seat (%d, %d): no non-conflicting occupant within %d, seating %s",
                    row, column, lookahead, queue[0].id,
                )

            occ = queue.pop(pick)
            seat_keys[row][column] = separation_key(occ)
            seated[(row, column)] = occ
    return seated


def _fill_checkerboard(
    buckets: Dict[Hashable, List[Occupant]],
    order: List[Hashable],
    room: RoomShape,
    count: int,
    column_major: bool = False,
) -> Dict[Seat, Occupant]:
    """Pack whole groups onto one colour of the seat checkerboard.

    The seats used are the first ``count`` in row-major order. Largest
    groups go onto the dark squares ((row + column) even) while they fit;
    the smallest group left over is split so its dark part takes the first
    dark seats and its light part the last light seats, keeping the two
    halves apart. ``column_major`` walks each colour column by column.
    """
    seats = [(r, c) for r in range(room.rows) for c in range(room.columns)][:count]
    if column_major:
        seats.sort(key=lambda s: (s[1], s[0]))
    dark = [s for s in seats if (s[0] + s[1]) % 2 == 0]
    light = [s for s in seats if (s[0] + s[1]) % 2 == 1]

    rank = {k: i for i, k in enumerate(order)}
    ranked = sorted(order, key=lambda k: (-len(buckets[k]), rank[k]))

    on_dark: List[Hashable] = []
    rest: List[Hashable] = []
    room_left = len(dark)
    for key in ranked:
        if len(buckets[key]) <= room_left:
            on_dark.append(key)
            room_left -= len(buckets[key])
        else:
            rest.append(key)

    dark_seq: List[Occupant] = []
    split_tail: List[Occupant] = []
    if room_left and rest:
        split = buckets[rest.pop()]
        dark_seq.extend(split[:room_left])
        split_tail = split[room_left:]
    for key in on_dark:
        dark_seq.extend(buckets[key])

    light_seq: List[Occupant] = []
    for key in rest:
        light_seq.extend(buckets[key])
    light_seq.extend(split_tail)

    seated = dict(zip(dark, dark_seq))
    seated.update(zip(light, light_seq))
    return seated


def _conflict_seats(seated: Dict[Seat, Occupant]) -> List[Seat]:
    """Later seat of every same-group pair, one entry per pair."""
    later = []
    for (row, column), occ in seated.items():
        key = separation_key(occ)
        for earlier in ((row - 1, column), (row, column - 1)):
            other = seated.get(earlier)
            if other is not None and separation_key(other) == key:
                later.append((row, column))
    return later


def allocate(
    occupants: List[Occupant],
    room: RoomShape,
    group_order: Optional[List[str]] = None,
    seed: Optional[int] = None,
    max_lookahead: Optional[int] = None,
    rebalance: bool = True,
) -> SeatingPlan:
    """Seat occupants in a rows x columns room, separating same-group neighbours.

    Occupants beyond capacity (last in input order) are excluded and reported.
    Seats are filled row-major; for each seat the first queued occupant whose
    group does not match an already-seated neighbour is chosen, looking at
    most ``max_lookahead`` entries ahead. When nobody in that window fits,
    the queue head is seated anyway.

    If that fill leaves same-group neighbours and ``rebalance`` is set, a
    checkerboard packing (row-wise, then column-wise) is tried and kept only
    when it has strictly fewer adjacent same-group pairs. ``relaxed_seats``
    lists the later seat of each remaining pair.
    """
    validate_room_shape(room)
    if max_lookahead is not None and (
        isinstance(max_lookahead, bool) or not isinstance(max_lookahead, int) or max_lookahead < 1
    ):
        raise ConfigurationError(f"max_lookahead must be a positive integer, got {max_lookahead!r}")

    capacity = room.capacity
    seated = list(occupants[:capacity])
    excluded = list(occupants[capacity:])

    buckets = partition_by_group(seated)
    order = resolve_group_order(list(buckets.keys()), group_order, seed)
    queue = interleave_groups(buckets, order)

    lookahead = max_lookahead or max(len(order), MIN_LOOKAHEAD)

    arrangement = _fill_greedy(queue, room, lookahead)
    conflicts = _conflict_seats(arrangement)

    if conflicts and rebalance:
        for column_major in (False, True):
            candidate = _fill_checkerboard(buckets, order, room, len(seated), column_major)
            candidate_conflicts = _conflict_seats(candidate)
            if len(candidate_conflicts) < len(conflicts):
                arrangement, conflicts = candidate, candidate_conflicts
            if not conflicts:
                break
        logger.info(
            "Greedy fill left same-group neighbours; %d pair(s) after rebalancing",
            len(conflicts),
        )

    grid = [[Cell() for _ in range(room.columns)] for _ in range(room.rows)]
    placements: List[Placement] = []
    for row, column in sorted(arrangement):
        occ = arrangement[(row, column)]
        grid[row][column] = Cell(occupied=True, occupant_id=occ.id, group=occ.group)
        placements.append(Placement(occ.id, row, column))
    relaxed = sorted(set(conflicts))

    if excluded:
        logger.info(
            "%d occupant(s) exceed room capacity %d and were not seated",
            len(excluded), capacity,
        )
    logger.info(
        "Seated %d of %d occupant(s) in %dx%d room (%d relaxed seat(s))",
        len(placements), len(occupants), room.rows, room.columns, len(relaxed),
    )

    return SeatingPlan(
        room=room,
        grid=grid,
        placements=placements,
        excluded=excluded,
        relaxed_seats=relaxed,
        group_order=list(dict.fromkeys(
            k if isinstance(k, str) else UNASSIGNED_GROUP for k in order
        )),
    )
