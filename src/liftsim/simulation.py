from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from liftsched import DEFAULT_SCHEDULER, DirectionGroup, Request, classify, get_scheduler

from .batch import RequestCollector
from .car import GROUND_FLOOR, CarState
from .config import SimulationConfig
from .dispatcher import CapacityAwareDispatcher
from .events import PhaseStarted, SimulationIdle, SimulationStarted, TraceEvent

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    IDLE = "idle"
    PROCESSING_ASCENDING = "ascending"
    PROCESSING_DESCENDING = "descending"
    RETURNING_TO_GROUND = "returning"


class Simulation:
    """Runs one request batch through the car and yields the trace.

    The ascending group is always served before the descending group, and
    the car always ends the run idle on the ground floor.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        scheduler_name: str = DEFAULT_SCHEDULER,
    ) -> None:
        self.config = config or SimulationConfig()
        self.scheduler_name = scheduler_name
        self.scheduler = get_scheduler(scheduler_name)
        self.phase = Phase.IDLE
        self.car: Optional[CarState] = None
        self.event_hooks: List[Callable[[TraceEvent], None]] = []

    def on_event(self, callback: Callable[[TraceEvent], None]) -> None:
        self.event_hooks.append(callback)

    def run(self, requests: Iterable[Request]) -> Iterator[TraceEvent]:
        """Yield trace events lazily; the car state lives only for this run."""
        groups = classify(requests)
        car = CarState(capacity=self.config.max_capacity)
        self.car = car
        logger.info(
            "simulation start: %d up, %d down, policy=%s",
            len(groups.ascending),
            len(groups.descending),
            self.scheduler_name,
        )
        yield self._emit(SimulationStarted(car.current_floor))

        yield from self._process(car, Phase.PROCESSING_ASCENDING, groups.ascending)
        yield from self._process(car, Phase.PROCESSING_DESCENDING, groups.descending)

        if car.current_floor != GROUND_FLOOR:
            self._transition(Phase.RETURNING_TO_GROUND)
            yield self._emit(PhaseStarted(Phase.RETURNING_TO_GROUND.value))
            for move in car.move_to(GROUND_FLOOR):
                yield self._emit(move)

        self._transition(Phase.IDLE)
        logger.info("simulation complete: idle at floor %d", car.current_floor)
        yield self._emit(SimulationIdle(car.current_floor))

    def run_to_list(self, requests: Iterable[Request]) -> List[TraceEvent]:
        return list(self.run(requests))

    def run_when_ready(self, collector: RequestCollector) -> List[TraceEvent]:
        """Block until the collector publishes its batch, then run it."""
        batch = collector.wait()
        return self.run_to_list(batch)

    def _process(self, car: CarState, phase: Phase, group: DirectionGroup) -> Iterator[TraceEvent]:
        self._transition(phase)
        stops = self.scheduler.plan_stops(group, car.current_floor, self.config.max_floor)
        if not stops:
            return
        logger.debug("%s stops: %s", phase.value, stops)
        yield self._emit(PhaseStarted(phase.value))
        dispatcher = CapacityAwareDispatcher(board_first=self.scheduler.board_first)
        for event in dispatcher.dispatch(car, group, stops):
            yield self._emit(event)

    def _transition(self, phase: Phase) -> None:
        logger.debug("phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase

    def _emit(self, event: TraceEvent) -> TraceEvent:
        for callback in self.event_hooks:
            callback(event)
        return event


def simulate(
    requests: Iterable[Request],
    config: Optional[SimulationConfig] = None,
    scheduler_name: str = DEFAULT_SCHEDULER,
) -> List[TraceEvent]:
    return Simulation(config, scheduler_name).run_to_list(requests)


def summarize(events: Iterable[TraceEvent]) -> Dict[str, int]:
    """Totals over a trace: boarded, alighted and floors travelled."""
    totals = {"boarded": 0, "alighted": 0, "floors_travelled": 0}
    for event in events:
        if event.kind == "board":
            totals["boarded"] += event.count
        elif event.kind == "alight":
            totals["alighted"] += event.count
        elif event.kind == "move":
            totals["floors_travelled"] += 1
    return totals
