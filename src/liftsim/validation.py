from __future__ import annotations

from typing import Union

from liftsched import Request

from .config import SimulationConfig


class InvalidRequestError(ValueError):
    """Raised for floors outside the building or a zero-length trip."""


def parse_floor(value: Union[str, int], config: SimulationConfig) -> int:
    """Convert user input to a floor number within ``[1, max_floor]``."""
    try:
        floor = int(str(value).strip())
    except ValueError:
        raise InvalidRequestError(out_of_range_message(config)) from None
    if floor < 1 or floor > config.max_floor:
        raise InvalidRequestError(out_of_range_message(config))
    return floor


def validate_request(source: Union[str, int], destination: Union[str, int], config: SimulationConfig) -> Request:
    source_floor = parse_floor(source, config)
    destination_floor = parse_floor(destination, config)
    if source_floor == destination_floor:
        raise InvalidRequestError(SAME_FLOOR_MESSAGE)
    return Request(source_floor, destination_floor)


SAME_FLOOR_MESSAGE = "Invalid input. Starting and destination floors cannot be the same."


def out_of_range_message(config: SimulationConfig) -> str:
    return f"Invalid input. Please enter a number between 1 and {config.max_floor}."
