from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RoomShape:
    rows: int
    columns: int

    @property
    def capacity(self) -> int:
        return self.rows * self.columns

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns


@dataclass
class Room:
    """An exam hall as recorded in the room master."""
    room_id: str
    rows: int
    columns: int
    room_number: str = ""
    capacity: Optional[int] = None  # declared capacity; rows * columns governs

    @property
    def shape(self) -> RoomShape:
        return RoomShape(self.rows, self.columns)

    @property
    def seatable_count(self) -> int:
        return self.rows * self.columns

    @property
    def capacity_mismatch(self) -> bool:
        return self.capacity is not None and self.capacity != self.seatable_count

    @property
    def label(self) -> str:
        return self.room_number or self.room_id
