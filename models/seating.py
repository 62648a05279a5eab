from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from models.occupant import Occupant
from models.room import RoomShape


@dataclass
class Cell:
    occupied: bool = False
    occupant_id: Optional[str] = None  # set iff occupied
    group: Optional[str] = None        # set iff occupied


@dataclass(frozen=True)
class Placement:
    occupant_id: str
    row: int
    column: int

    def seat_number(self, columns: int) -> int:
        """1-based row-major seat number, as printed on hall tickets."""
        return self.row * columns + self.column + 1


@dataclass
class SeatingPlan:
    room: RoomShape
    grid: List[List[Cell]]
    placements: List[Placement] = field(default_factory=list)
    excluded: List[Occupant] = field(default_factory=list)
    relaxed_seats: List[Tuple[int, int]] = field(default_factory=list)  # later seat of each same-group pair
    group_order: List[str] = field(default_factory=list)

    @property
    def excluded_count(self) -> int:
        return len(self.excluded)

    @property
    def seated_count(self) -> int:
        return len(self.placements)
