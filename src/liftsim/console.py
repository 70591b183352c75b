"""Terminal front end: interactive request entry and text trace rendering."""
from __future__ import annotations

from typing import Callable, Iterable, Optional

from liftsched import RequestBatch

from .batch import RequestCollector
from .car import GROUND_FLOOR
from .config import SimulationConfig
from .events import TraceEvent
from .validation import SAME_FLOOR_MESSAGE, InvalidRequestError, parse_floor, validate_request

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

PHASE_TITLES = {
    "ascending": "Processing Up Requests",
    "descending": "Processing Down Requests",
    "returning": f"Returning to Floor {GROUND_FLOOR}",
}


def format_event(event: TraceEvent) -> str:
    if event.kind == "start":
        return f"\n=== Elevator Simulation Starts ===\nElevator starts at floor {event.floor}"
    if event.kind == "phase":
        return f"\n--- {PHASE_TITLES.get(event.phase, event.phase)} ---"
    if event.kind == "move":
        arrow = ">>" if event.to_floor > event.from_floor else "<<"
        return f"{event.from_floor:2d} {arrow} {event.to_floor:2d}"
    if event.kind == "board":
        return f"{event.floor:2d} | Passengers getting on:  {event.count} [Passengers: {event.passengers}]"
    if event.kind == "alight":
        return f"{event.floor:2d} | Passengers getting off: {event.count} [Passengers: {event.passengers}]"
    if event.kind == "idle":
        return f"\n=== Elevator is now idle at Floor {event.floor} ==="
    raise ValueError(f"Unknown trace event {event!r}")


def render_trace(events: Iterable[TraceEvent], output_fn: OutputFn = print) -> None:
    for event in events:
        output_fn(format_event(event))


def collect_requests(
    collector: Optional[RequestCollector] = None,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> RequestBatch:
    """Prompt for requests until the user stops or the batch is full.

    Invalid floors are reported and asked for again. End of input stops
    collection; a half-entered request is discarded.
    """

    if collector is None:
        collector = RequestCollector()
    config = collector.config
    output_fn("=== Welcome to the Elevator System ===")
    output_fn(f"Maximum floors: {config.max_floor}, Maximum requests: {config.max_requests}\n")

    try:
        while not collector.is_full:
            source = _prompt_floor("Enter starting floor (from): ", config, input_fn, output_fn)
            destination = _prompt_floor(
                "Enter destination floor (to): ", config, input_fn, output_fn, exclude=source
            )
            collector.add(validate_request(source, destination, config))
            if not collector.is_full:
                answer = input_fn("Enter another request? (y/n): ").strip()
                if answer[:1] in ("n", "N"):
                    break
    except EOFError:
        output_fn("")

    if collector.is_full:
        output_fn("Maximum number of requests reached.")
    return collector.finalize()


def _prompt_floor(
    prompt: str,
    config: SimulationConfig,
    input_fn: InputFn,
    output_fn: OutputFn,
    exclude: Optional[int] = None,
) -> int:
    while True:
        try:
            floor = parse_floor(input_fn(prompt), config)
        except InvalidRequestError as exc:
            output_fn(str(exc))
            continue
        if floor == exclude:
            output_fn(SAME_FLOOR_MESSAGE)
            continue
        return floor
