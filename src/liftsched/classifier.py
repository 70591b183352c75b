from __future__ import annotations

from typing import Iterable, NamedTuple

from .interface import ASCENDING, DESCENDING, DirectionGroup, Request


class ClassifiedBatch(NamedTuple):
    ascending: DirectionGroup
    descending: DirectionGroup


def classify(requests: Iterable[Request]) -> ClassifiedBatch:
    """Partition requests into ascending and descending groups.

    Input order is preserved inside each group; the batch itself is left
    untouched.
    """

    requests = tuple(requests)
    return ClassifiedBatch(
        ascending=DirectionGroup(ASCENDING, tuple(r for r in requests if r.direction == ASCENDING)),
        descending=DirectionGroup(DESCENDING, tuple(r for r in requests if r.direction == DESCENDING)),
    )
