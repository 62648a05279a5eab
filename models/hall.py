from dataclasses import dataclass, field
from typing import Dict, List

from models.occupant import Occupant
from models.seating import SeatingPlan


@dataclass
class HallAssignment:
    """Seating plans for several exam halls filled in sequence."""
    plans: Dict[str, SeatingPlan] = field(default_factory=dict)  # room_id -> plan
    unseated: List[Occupant] = field(default_factory=list)

    @property
    def seated_count(self) -> int:
        return sum(p.seated_count for p in self.plans.values())

    @property
    def unseated_count(self) -> int:
        return len(self.unseated)
