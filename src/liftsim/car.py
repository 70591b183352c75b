from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .events import Move

GROUND_FLOOR = 1


@dataclass
class CarState:
    """Position and load of the car during one run."""

    capacity: int
    current_floor: int = GROUND_FLOOR
    current_passengers: int = 0

    @property
    def free_space(self) -> int:
        return max(0, self.capacity - self.current_passengers)

    def move_to(self, floor: int) -> Iterator[Move]:
        """Step one floor at a time towards ``floor``, yielding each move."""
        while self.current_floor != floor:
            step = 1 if floor > self.current_floor else -1
            origin = self.current_floor
            self.current_floor += step
            yield Move(origin, self.current_floor, self.current_passengers)

    def alight(self, demand: int) -> int:
        alighting = min(demand, self.current_passengers)
        self.current_passengers -= alighting
        return alighting

    def board(self, demand: int) -> int:
        boarding = min(demand, self.free_space)
        self.current_passengers += boarding
        return boarding
