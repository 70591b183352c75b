from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Protocol, Tuple

from .utils import aggregate_demand

ASCENDING = 1
DESCENDING = -1


@dataclass(frozen=True)
class Request:
    """A single floor-to-floor trip."""

    source: int
    destination: int

    @property
    def direction(self) -> int:
        """Return +1 for up, -1 for down."""
        return ASCENDING if self.destination > self.source else DESCENDING


@dataclass(frozen=True)
class RequestBatch:
    """Read-only snapshot of the requests collected before a run."""

    requests: Tuple[Request, ...] = ()

    @classmethod
    def of(cls, pairs: Iterable[Tuple[int, int]]) -> "RequestBatch":
        return cls(tuple(Request(source, destination) for source, destination in pairs))

    def __iter__(self):
        return iter(self.requests)

    def __len__(self) -> int:
        return len(self.requests)


@dataclass(frozen=True)
class DirectionGroup:
    """Requests sharing one travel direction, with per-floor demand."""

    direction: int
    requests: Tuple[Request, ...] = ()
    boarding_demand: Dict[int, int] = field(init=False, compare=False)
    alighting_demand: Dict[int, int] = field(init=False, compare=False)

    def __post_init__(self) -> None:
        boarding, alighting = aggregate_demand(self.requests)
        object.__setattr__(self, "boarding_demand", boarding)
        object.__setattr__(self, "alighting_demand", alighting)

    @property
    def demand_floors(self) -> List[int]:
        return sorted(set(self.boarding_demand) | set(self.alighting_demand))

    def __bool__(self) -> bool:
        return bool(self.requests)

    def __len__(self) -> int:
        return len(self.requests)


class TraversalPolicy(Protocol):
    """Strategy interface for ordering the stops of one direction group."""

    #: Whether boarding is applied before alighting at a shared floor.
    board_first: bool

    def plan_stops(self, group: DirectionGroup, current_floor: int, max_floor: int) -> List[int]:
        """
        Return the floors at which the car stops to serve ``group``.

        Consecutive stops need not be adjacent; the dispatcher walks the car
        through every floor in between. An empty group yields no stops.
        """
        ...
