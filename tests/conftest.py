import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from hrcache.cache import KeyedTTLCache


class FakeClock:
    """Manually advanced wall clock in milliseconds."""

    def __init__(self, start: float = 1_700_000_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def listener_errors():
    """Error sink that records ListenerError instances."""
    return []


@pytest.fixture
def cache(clock, listener_errors):
    return KeyedTTLCache(clock=clock, error_sink=listener_errors.append)
