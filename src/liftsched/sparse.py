from __future__ import annotations

from typing import List

from .interface import DirectionGroup
from .utils import sort_floors_in_direction


class SparseStopScheduler:
    """Stops only where someone gets on or off, boarding before alighting."""

    board_first = True

    def plan_stops(self, group: DirectionGroup, current_floor: int, max_floor: int) -> List[int]:
        return sort_floors_in_direction(group.demand_floors, group.direction)
