"""Post-allocation checks: adjacency conflicts, utilization, and explanations."""

from collections import Counter
from typing import List, Optional, Tuple

from models.seating import SeatingPlan
from config.defaults import UNASSIGNED_GROUP, UTILIZATION_WARNING_THRESHOLD

Seat = Tuple[int, int]


def find_adjacency_conflicts(plan: SeatingPlan) -> List[Tuple[Seat, Seat, str]]:
    """List each pair of 4-adjacent occupied seats sharing a group, once."""
    conflicts = []
    rows, columns = plan.room.rows, plan.room.columns
    for r in range(rows):
        for c in range(columns):
            cell = plan.grid[r][c]
            if not cell.occupied or cell.group == UNASSIGNED_GROUP:
                continue
            # Only look right and down so each pair is reported once
            for nr, nc in ((r, c + 1), (r + 1, c)):
                if nr >= rows or nc >= columns:
                    continue
                other = plan.grid[nr][nc]
                if other.occupied and other.group == cell.group:
                    conflicts.append(((r, c), (nr, nc), cell.group))
    return conflicts


def count_adjacency_conflicts(plan: SeatingPlan) -> int:
    return len(find_adjacency_conflicts(plan))


def seat_utilization(plan: SeatingPlan) -> dict:
    """Summary stats for a seating plan."""
    capacity = plan.room.capacity
    seated = plan.seated_count
    group_counts = Counter(
        cell.group for row in plan.grid for cell in row if cell.occupied
    )
    return {
        "capacity": capacity,
        "seated": seated,
        "empty": capacity - seated,
        "excluded": plan.excluded_count,
        "utilization_pct": seated / capacity if capacity > 0 else 0,
        "group_counts": dict(group_counts),
        "relaxed_seats": len(plan.relaxed_seats),
        "conflicts": count_adjacency_conflicts(plan),
    }


def capacity_warning(plan: SeatingPlan) -> Optional[str]:
    if plan.excluded_count == 0:
        return None
    return (
        f"{plan.excluded_count} student(s) could not be seated: room too small "
        f"({plan.room.capacity} seats for {plan.seated_count + plan.excluded_count} students)."
    )


def explain_plan(plan: SeatingPlan) -> List[str]:
    """Produce a step-by-step explanation of how a plan was built."""
    stats = seat_utilization(plan)
    steps = []

    total = plan.seated_count + plan.excluded_count
    steps.append(
        f"Step 1 - Capacity: {plan.room.rows} rows x {plan.room.columns} columns "
        f"= {plan.room.capacity} seats for {total} students"
    )

    if plan.excluded_count:
        steps.append(
            f"Note: {plan.excluded_count} students beyond capacity were excluded "
            f"(last in roster order)"
        )

    order = ", ".join(plan.group_order) if plan.group_order else "none"
    steps.append(
        f"Step 2 - Rotation: {len(plan.group_order)} groups interleaved round-robin "
        f"in order [{order}]"
    )

    steps.append(
        f"Step 3 - Fill: seats filled row by row; {stats['seated']} seated, "
        f"{stats['empty']} left empty ({stats['utilization_pct']:.0%} utilization)"
    )

    if plan.relaxed_seats:
        seats = ", ".join(f"R{r + 1}C{c + 1}" for r, c in plan.relaxed_seats[:10])
        more = "" if len(plan.relaxed_seats) <= 10 else f" and {len(plan.relaxed_seats) - 10} more"
        steps.append(
            f"Step 4 - Separation relaxed at {len(plan.relaxed_seats)} seat(s) "
            f"next to a same-group neighbour: {seats}{more}"
        )
    else:
        steps.append("Step 4 - Separation held at every seat")

    steps.append(f"Result: {stats['conflicts']} adjacent same-group pair(s)")

    if plan.room.capacity and stats["utilization_pct"] < UTILIZATION_WARNING_THRESHOLD:
        steps.append(
            f"Note: room is under {UTILIZATION_WARNING_THRESHOLD:.0%} full; "
            f"a smaller hall may suffice"
        )

    return steps
