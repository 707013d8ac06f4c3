"""Shared test fixtures for request-chaos tests."""

from __future__ import annotations

from typing import Callable

import pytest

from request_chaos.chaos.policy import ChaosPolicy
from request_chaos.core.engine import ChaosEngine
from request_chaos.core.recorder import Recorder
from request_chaos.events.sink import ListSink


class ScriptedRandom:
    """Random source that returns a fixed sequence of draws."""

    def __init__(self, *values: float):
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        if not self._values:
            raise AssertionError("ScriptedRandom ran out of values")
        return self._values.pop(0)


# =============================================================================
# Core Fixtures
# =============================================================================


@pytest.fixture
def list_sink() -> ListSink:
    """Fresh ListSink instance."""
    return ListSink()


@pytest.fixture
def recorder(list_sink: ListSink) -> Recorder:
    """Recorder collecting events into list_sink."""
    return Recorder(list_sink)


@pytest.fixture
def dev_environ() -> dict[str, str]:
    """Environment mapping for a development box."""
    return {"APP_ENV": "development"}


@pytest.fixture
def make_engine(
    recorder: Recorder, dev_environ: dict[str, str]
) -> Callable[..., ChaosEngine]:
    """Factory for engines with scripted randomness and a development environment."""

    def _make(policy: ChaosPolicy, *draws: float) -> ChaosEngine:
        return ChaosEngine(
            policy,
            environ=dev_environ,
            rng=ScriptedRandom(*draws),
            recorder=recorder,
        )

    return _make


# =============================================================================
# Policy Fixtures
# =============================================================================


@pytest.fixture
def latency_policy() -> ChaosPolicy:
    """Fixed 250ms latency, no errors."""
    return ChaosPolicy(latency=250)


@pytest.fixture
def error_policy() -> ChaosPolicy:
    """Always answer with a 503."""
    return ChaosPolicy(error_rate=1.0, error_status=503, error_body="chaos")


@pytest.fixture
def mixed_policy() -> ChaosPolicy:
    """Latency range plus a 50% error rate."""
    return ChaosPolicy(latency=(100, 200), error_rate=0.5)
