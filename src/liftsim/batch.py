from __future__ import annotations

import logging
from concurrent.futures import Future
from typing import List, Optional

from liftsched import Request, RequestBatch

from .config import SimulationConfig

logger = logging.getLogger(__name__)


class BatchFullError(RuntimeError):
    """Raised when a request would exceed ``max_requests``."""


class BatchClosedError(RuntimeError):
    """Raised when the collector is used after the batch was published."""


class RequestCollector:
    """Gathers requests and hands the finished batch over exactly once.

    The consumer blocks on :meth:`wait` until :meth:`finalize` publishes the
    batch. After that the collector is closed and the batch is immutable.
    """

    def __init__(self, config: Optional[SimulationConfig] = None) -> None:
        self.config = config or SimulationConfig()
        self._requests: List[Request] = []
        self._published: "Future[RequestBatch]" = Future()

    def __len__(self) -> int:
        return len(self._requests)

    @property
    def is_full(self) -> bool:
        return len(self._requests) >= self.config.max_requests

    @property
    def closed(self) -> bool:
        return self._published.done()

    def add(self, request: Request) -> None:
        if self.closed:
            raise BatchClosedError("batch already finalized")
        if self.is_full:
            raise BatchFullError(f"Maximum number of requests ({self.config.max_requests}) reached")
        self._requests.append(request)

    def finalize(self) -> RequestBatch:
        if self.closed:
            raise BatchClosedError("batch already finalized")
        batch = RequestBatch(tuple(self._requests))
        self._published.set_result(batch)
        logger.debug("batch finalized with %d requests", len(batch))
        return batch

    def wait(self, timeout: Optional[float] = None) -> RequestBatch:
        return self._published.result(timeout)
