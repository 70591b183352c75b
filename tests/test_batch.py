from concurrent.futures import TimeoutError as FutureTimeoutError

import pytest

from liftsched import Request, RequestBatch
from liftsim import BatchClosedError, BatchFullError, RequestCollector, SimulationConfig


class TestRequestCollector:
    def test_finalize_publishes_an_immutable_batch(self):
        collector = RequestCollector()
        collector.add(Request(1, 4))
        collector.add(Request(6, 2))
        batch = collector.finalize()
        assert batch == RequestBatch((Request(1, 4), Request(6, 2)))
        assert collector.wait() is batch
        assert collector.closed

    def test_rejects_requests_beyond_the_ceiling(self):
        collector = RequestCollector(SimulationConfig(max_requests=2))
        collector.add(Request(1, 2))
        collector.add(Request(2, 3))
        assert collector.is_full
        with pytest.raises(BatchFullError, match="Maximum number of requests"):
            collector.add(Request(3, 4))
        assert len(collector) == 2

    def test_signal_fires_only_once(self):
        collector = RequestCollector()
        collector.finalize()
        with pytest.raises(BatchClosedError):
            collector.finalize()
        with pytest.raises(BatchClosedError):
            collector.add(Request(1, 2))

    def test_wait_blocks_until_finalized(self):
        collector = RequestCollector()
        with pytest.raises(FutureTimeoutError):
            collector.wait(timeout=0.01)

    def test_empty_batch_can_be_published(self):
        assert len(RequestCollector().finalize()) == 0
