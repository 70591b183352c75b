from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING, Dict, Iterable, List, Tuple

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from .interface import Request


def aggregate_demand(requests: Iterable["Request"]) -> Tuple[Dict[int, int], Dict[int, int]]:
    """Count boarding passengers per source floor and alighting per destination.

    Requests sharing a floor are summed, so a floor appears at most once in
    each mapping and stop ordering never has to break ties.
    """

    boarding: Dict[int, int] = defaultdict(int)
    alighting: Dict[int, int] = defaultdict(int)
    for request in requests:
        boarding[request.source] += 1
        alighting[request.destination] += 1
    return dict(boarding), dict(alighting)


def sort_floors_in_direction(floors: Iterable[int], direction: int) -> List[int]:
    """Sort floors to mirror SCAN behavior for a given direction."""

    return sorted(floors, reverse=direction < 0)
