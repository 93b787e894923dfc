from typing import Iterator, List

import pytest

from ethereum_ecrecover import trace
from ethereum_ecrecover.config import default_recoverer, get_recoverer
from ethereum_ecrecover.crypto.backends import BACKENDS, SignatureRecoverer
from ethereum_ecrecover.trace import TraceEvent


@pytest.fixture(params=sorted(BACKENDS))
def recoverer(request: pytest.FixtureRequest) -> SignatureRecoverer:
    """
    Every signature recovery backend in turn.
    """
    return get_recoverer(request.param)


@pytest.fixture
def trace_events(monkeypatch: pytest.MonkeyPatch) -> List[TraceEvent]:
    """
    Collects the events emitted through `ethereum_ecrecover.trace`.
    """
    events: List[TraceEvent] = []
    monkeypatch.setattr(trace, "evm_trace", events.append)
    return events


@pytest.fixture(autouse=True)
def fresh_default_recoverer() -> Iterator[None]:
    """
    Forget the configured backend so each test reads its own environment.
    """
    default_recoverer.cache_clear()
    yield
    default_recoverer.cache_clear()
