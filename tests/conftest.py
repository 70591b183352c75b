from __future__ import annotations

from typing import Dict, List

import pytest

from liftsched import RequestBatch
from liftsim import SimulationConfig, TraceEvent


@pytest.fixture
def config() -> SimulationConfig:
    return SimulationConfig()


def batch(*pairs) -> RequestBatch:
    return RequestBatch.of(pairs)


def of_kind(events: List[TraceEvent], kind: str) -> List[TraceEvent]:
    return [event for event in events if event.kind == kind]


def split_phases(events: List[TraceEvent]) -> Dict[str, List[TraceEvent]]:
    """Group events by the phase header that precedes them."""
    phases: Dict[str, List[TraceEvent]] = {}
    current = None
    for event in events:
        if event.kind == "phase":
            current = phases.setdefault(event.phase, [])
        elif current is not None:
            current.append(event)
    return phases
