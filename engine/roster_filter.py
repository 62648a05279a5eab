"""Pre-allocation eligibility filtering of the student roster."""

import logging
from dataclasses import dataclass, field
from typing import List

from models.occupant import Occupant

logger = logging.getLogger(__name__)


@dataclass
class RosterFilterResult:
    eligible: List[Occupant] = field(default_factory=list)
    detained: List[Occupant] = field(default_factory=list)
    inactive: List[Occupant] = field(default_factory=list)
    duplicates: List[Occupant] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.eligible) + len(self.detained) + len(self.inactive) + len(self.duplicates)


def filter_eligible(occupants: List[Occupant]) -> RosterFilterResult:
    """Keep active, non-detained students in roster order.

    A student both inactive and detained is counted as detained. Repeated
    ids keep their first occurrence.
    """
    result = RosterFilterResult()
    seen = set()
    for occ in occupants:
        if occ.id in seen:
            result.duplicates.append(occ)
            continue
        seen.add(occ.id)
        if occ.is_detained:
            result.detained.append(occ)
        elif not occ.is_active:
            result.inactive.append(occ)
        else:
            result.eligible.append(occ)

    logger.info(
        "Roster filter: %d eligible, %d detained, %d inactive, %d duplicate",
        len(result.eligible), len(result.detained),
        len(result.inactive), len(result.duplicates),
    )
    return result
