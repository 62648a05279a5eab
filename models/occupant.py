from dataclasses import dataclass
from typing import Optional

from config.defaults import UNASSIGNED_GROUP


@dataclass
class Occupant:
    id: str
    group: str                    # department / cohort used for separation
    name: str = ""
    roll_number: str = ""
    is_active: bool = True
    is_detained: bool = False

    @classmethod
    def from_record(cls, record: dict) -> "Occupant":
        """Build an occupant from a plain ``{"id": ..., "group": ...}`` record.

        A missing or blank group is bucketed into UNASSIGNED_GROUP.
        """
        group: Optional[str] = record.get("group")
        if group is None or not str(group).strip():
            group = UNASSIGNED_GROUP
        return cls(
            id=str(record["id"]).strip(),
            group=str(group).strip(),
            name=str(record.get("name", "") or ""),
            roll_number=str(record.get("roll_number", "") or ""),
            is_active=bool(record.get("is_active", True)),
            is_detained=bool(record.get("is_detained", False)),
        )
