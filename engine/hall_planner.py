"""Fill several exam halls in sequence, spilling overflow into the next hall."""

import logging
from typing import Iterable, List, Optional

from models.occupant import Occupant
from models.room import Room
from models.hall import HallAssignment
from models.seating import SeatingPlan
from models.errors import ConfigurationError
from engine.seating_allocator import allocate

logger = logging.getLogger(__name__)


def plan_halls(
    occupants: List[Occupant],
    rooms: List[Room],
    group_order: Optional[List[str]] = None,
    seed: Optional[int] = None,
    max_lookahead: Optional[int] = None,
) -> HallAssignment:
    """Seat occupants across rooms in the given room order.

    Each room's overflow is carried to the next one. The rotation order
    chosen for the first room is reused for the rest.
    """
    if not rooms:
        raise ConfigurationError("At least one room is required to plan halls")
    room_ids = [r.room_id for r in rooms]
    if len(set(room_ids)) != len(room_ids):
        raise ConfigurationError(f"Duplicate room ids: {room_ids}")

    result = HallAssignment()
    remaining = list(occupants)
    order = group_order

    for room in rooms:
        if room.capacity_mismatch:
            logger.warning(
                "Room %s declares capacity %s but has %d seats; using %d",
                room.room_id, room.capacity, room.seatable_count, room.seatable_count,
            )
        plan = allocate(remaining, room.shape, group_order=order, seed=seed,
                        max_lookahead=max_lookahead)
        if order is None:
            order = plan.group_order
            seed = None
        result.plans[room.room_id] = plan
        remaining = plan.excluded

    result.unseated = remaining
    if remaining:
        logger.info("%d student(s) left unseated after %d hall(s)", len(remaining), len(rooms))
    return result


def _placed_ids(plans: Iterable[SeatingPlan]) -> set:
    return {p.occupant_id for plan in plans for p in plan.placements}


def unseated_students(occupants: List[Occupant], plans: Iterable[SeatingPlan]) -> List[Occupant]:
    """Occupants without a seat in any of ``plans``, in roster order."""
    placed = _placed_ids(plans)
    return [o for o in occupants if o.id not in placed]


def plan_single_hall(
    occupants: List[Occupant],
    room: Room,
    other_plans: Iterable[SeatingPlan] = (),
    group_order: Optional[List[str]] = None,
    seed: Optional[int] = None,
    max_lookahead: Optional[int] = None,
) -> SeatingPlan:
    """Seat one room of an exam, skipping students already placed in ``other_plans``."""
    candidates = unseated_students(occupants, other_plans)
    skipped = len(occupants) - len(candidates)
    if skipped:
        logger.info("Room %s: %d student(s) already seated in other halls", room.room_id, skipped)
    return allocate(candidates, room.shape, group_order=group_order, seed=seed,
                    max_lookahead=max_lookahead)
