"""Single-car batch simulation for lifttrace."""

from .batch import BatchClosedError, BatchFullError, RequestCollector
from .car import GROUND_FLOOR, CarState
from .config import SimulationConfig
from .dispatcher import CapacityAwareDispatcher
from .events import Alight, Board, Move, PhaseStarted, SimulationIdle, SimulationStarted, TraceEvent
from .simulation import Phase, Simulation, simulate, summarize
from .validation import InvalidRequestError, parse_floor, validate_request

__all__ = [
    "Alight",
    "BatchClosedError",
    "BatchFullError",
    "Board",
    "CapacityAwareDispatcher",
    "CarState",
    "GROUND_FLOOR",
    "InvalidRequestError",
    "Move",
    "Phase",
    "PhaseStarted",
    "RequestCollector",
    "Simulation",
    "SimulationConfig",
    "SimulationIdle",
    "SimulationStarted",
    "TraceEvent",
    "parse_floor",
    "simulate",
    "summarize",
    "validate_request",
]
