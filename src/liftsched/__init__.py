from __future__ import annotations

from typing import Dict, Type

from .classifier import ClassifiedBatch, classify
from .interface import ASCENDING, DESCENDING, DirectionGroup, Request, RequestBatch, TraversalPolicy
from .sparse import SparseStopScheduler
from .sweep import FullSweepScheduler

__all__ = [
    "ASCENDING",
    "DESCENDING",
    "ClassifiedBatch",
    "DEFAULT_SCHEDULER",
    "DirectionGroup",
    "FullSweepScheduler",
    "Request",
    "RequestBatch",
    "SparseStopScheduler",
    "TraversalPolicy",
    "classify",
    "get_scheduler",
]


DEFAULT_SCHEDULER = "sweep"

SCHEDULER_REGISTRY: Dict[str, Type[TraversalPolicy]] = {
    "sweep": FullSweepScheduler,
    "sparse": SparseStopScheduler,
}


def get_scheduler(name: str, **kwargs) -> TraversalPolicy:
    cls = SCHEDULER_REGISTRY.get(name.lower())
    if cls is None:
        raise ValueError(f"Unknown scheduler '{name}'. Available: {', '.join(SCHEDULER_REGISTRY)}")
    return cls(**kwargs)
