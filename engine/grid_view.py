"""Grid and table views of seating plans, including rebuilds from stored seats."""

from typing import Dict, List, Optional

import pandas as pd

from models.occupant import Occupant
from models.room import RoomShape
from models.seating import Cell, Placement, SeatingPlan
from models.errors import ConfigurationError
from engine.seating_allocator import validate_room_shape
from config.defaults import UNKNOWN_OCCUPANT


def grid_to_records(plan: SeatingPlan) -> List[List[dict]]:
    """grid[row][column] as plain dicts; id and group only on occupied seats."""
    records = []
    for row in plan.grid:
        out_row = []
        for cell in row:
            rec = {"occupied": cell.occupied}
            if cell.occupied:
                rec["occupant_id"] = cell.occupant_id
                rec["group"] = cell.group
            out_row.append(rec)
        records.append(out_row)
    return records


def grid_to_dataframe(plan: SeatingPlan) -> pd.DataFrame:
    """Rows x columns table of occupant ids, blank where the seat is empty."""
    data = [
        [cell.occupant_id if cell.occupied else "" for cell in row]
        for row in plan.grid
    ]
    return pd.DataFrame(
        data,
        index=[f"Row {r + 1}" for r in range(plan.room.rows)],
        columns=[f"Col {c + 1}" for c in range(plan.room.columns)],
    )


def placements_to_dataframe(
    plan: SeatingPlan,
    roster: Optional[List[Occupant]] = None,
) -> pd.DataFrame:
    """Flat seat list, one row per seated occupant, ready for export."""
    by_id: Dict[str, Occupant] = {o.id: o for o in (roster or [])}
    rows = []
    for p in plan.placements:
        occ = by_id.get(p.occupant_id)
        cell = plan.grid[p.row][p.column]
        rows.append({
            "Occupant ID": p.occupant_id,
            "Name": occ.name if occ else "",
            "Roll Number": occ.roll_number if occ else "",
            "Group": cell.group,
            "Row": p.row,
            "Column": p.column,
            "Seat Number": p.seat_number(plan.room.columns),
        })
    columns = ["Occupant ID", "Name", "Roll Number", "Group", "Row", "Column", "Seat Number"]
    return pd.DataFrame(rows, columns=columns)


def build_grid_from_placements(
    room: RoomShape,
    placements: List[Placement],
    roster: List[Occupant],
) -> List[List[Cell]]:
    """Rebuild a seat grid from stored placements.

    Seats whose occupant is missing from the roster show as UNKNOWN_OCCUPANT.
    """
    validate_room_shape(room)
    by_id = {o.id: o for o in roster}
    grid = [[Cell() for _ in range(room.columns)] for _ in range(room.rows)]

    for p in placements:
        if not room.in_bounds(p.row, p.column):
            raise ConfigurationError(
                f"Stored seat ({p.row}, {p.column}) for {p.occupant_id} is outside "
                f"the {room.rows}x{room.columns} room"
            )
        if grid[p.row][p.column].occupied:
            raise ConfigurationError(
                f"Seat ({p.row}, {p.column}) is stored twice "
                f"({grid[p.row][p.column].occupant_id} and {p.occupant_id})"
            )
        occ = by_id.get(p.occupant_id)
        if occ is None:
            grid[p.row][p.column] = Cell(True, UNKNOWN_OCCUPANT, UNKNOWN_OCCUPANT)
        else:
            grid[p.row][p.column] = Cell(True, occ.id, occ.group)
    return grid
