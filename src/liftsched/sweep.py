from __future__ import annotations

from typing import List

from .interface import DirectionGroup


class FullSweepScheduler:
    """Visits every floor between the car and the end of the shaft.

    Ascending groups sweep up to the top floor, descending groups sweep down
    to the ground floor. Riders get off before new riders get on.
    """

    board_first = False

    def plan_stops(self, group: DirectionGroup, current_floor: int, max_floor: int) -> List[int]:
        floors = group.demand_floors
        if not floors:
            return []
        if group.direction > 0:
            start = min(current_floor, floors[0])
            return list(range(start, max_floor + 1))
        # Descending riders are only picked up on the way down, so the sweep
        # starts no lower than the highest floor with demand.
        start = max(current_floor, floors[-1])
        return list(range(start, 0, -1))
