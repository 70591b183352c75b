"""Trace events produced by a simulation run, in emission order."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import ClassVar, Union


class _Event:
    kind: ClassVar[str]

    def to_dict(self) -> dict:
        payload = {"kind": self.kind}
        payload.update(asdict(self))
        return payload


@dataclass(frozen=True)
class SimulationStarted(_Event):
    kind: ClassVar[str] = "start"

    floor: int


@dataclass(frozen=True)
class PhaseStarted(_Event):
    kind: ClassVar[str] = "phase"

    phase: str


@dataclass(frozen=True)
class Move(_Event):
    kind: ClassVar[str] = "move"

    from_floor: int
    to_floor: int
    passengers: int


@dataclass(frozen=True)
class Board(_Event):
    kind: ClassVar[str] = "board"

    floor: int
    count: int
    passengers: int


@dataclass(frozen=True)
class Alight(_Event):
    kind: ClassVar[str] = "alight"

    floor: int
    count: int
    passengers: int


@dataclass(frozen=True)
class SimulationIdle(_Event):
    kind: ClassVar[str] = "idle"

    floor: int


TraceEvent = Union[SimulationStarted, PhaseStarted, Move, Board, Alight, SimulationIdle]
