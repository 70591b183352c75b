from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Union

from liftsched import DirectionGroup

from .car import CarState
from .events import Alight, Board, Move

logger = logging.getLogger(__name__)

DispatchEvent = Union[Move, Board, Alight]


class CapacityAwareDispatcher:
    """Walks the car through planned stops, loading and unloading riders.

    Boarding is capped by free space and alighting by the current load.
    Riders who do not fit are dropped: they are neither queued for a later
    trip nor reported as an error.
    """

    def __init__(self, board_first: bool = False) -> None:
        self.board_first = board_first

    def dispatch(
        self, car: CarState, group: DirectionGroup, stops: Iterable[int]
    ) -> Iterator[DispatchEvent]:
        for floor in stops:
            yield from car.move_to(floor)
            yield from self._serve_floor(car, group, floor)

    def _serve_floor(self, car: CarState, group: DirectionGroup, floor: int) -> List[DispatchEvent]:
        actions = (self._board, self._alight) if self.board_first else (self._alight, self._board)
        events: List[DispatchEvent] = []
        for action in actions:
            event = action(car, group, floor)
            if event is not None:
                events.append(event)
        return events

    def _alight(self, car: CarState, group: DirectionGroup, floor: int) -> Alight | None:
        demand = group.alighting_demand.get(floor, 0)
        alighting = car.alight(demand)
        if alighting < demand:
            logger.debug("floor %d: %d alighting requests had no rider aboard", floor, demand - alighting)
        if alighting <= 0:
            return None
        return Alight(floor, alighting, car.current_passengers)

    def _board(self, car: CarState, group: DirectionGroup, floor: int) -> Board | None:
        demand = group.boarding_demand.get(floor, 0)
        boarding = car.board(demand)
        if boarding < demand:
            logger.debug("floor %d: car full, %d passengers left behind", floor, demand - boarding)
        if boarding <= 0:
            return None
        return Board(floor, boarding, car.current_passengers)
