"""Chaos decision engine."""

from __future__ import annotations

import math
import random
from typing import Mapping, Protocol

from request_chaos.chaos.builder import PolicyBuilder
from request_chaos.chaos.decision import ChaosDecision
from request_chaos.chaos.policy import ChaosPolicy
from request_chaos.core.environment import is_blocked_environment
from request_chaos.core.recorder import Recorder
from request_chaos.types import SkipReason


class RandomSource(Protocol):
    """Anything with a ``random()`` returning a float in [0, 1)."""

    def random(self) -> float: ...


def _build_if_needed(policy_or_builder: ChaosPolicy | PolicyBuilder) -> ChaosPolicy:
    """Convert PolicyBuilder to ChaosPolicy if needed."""
    if isinstance(policy_or_builder, PolicyBuilder):
        return policy_or_builder.build()
    return policy_or_builder


class ChaosEngine:
    """Evaluates a ChaosPolicy against incoming requests.

    The engine keeps no per-request state; the only thing shared between
    calls is the random generator.

    Example:
        engine = ChaosEngine(chaos().with_latency(200).with_error_rate(0.1))
        decision = engine.decide("GET", "/orders")
        if decision.injects_error:
            ...
    """

    def __init__(
        self,
        policy: ChaosPolicy | PolicyBuilder | None = None,
        *,
        environ: Mapping[str, str] | None = None,
        rng: RandomSource | None = None,
        recorder: Recorder | None = None,
    ):
        """Initialize the engine.

        Args:
            policy: Policy (or builder) to evaluate. Defaults to an empty policy,
                which never injects anything.
            environ: Mapping consulted for environment gating. Defaults to
                ``os.environ``, read on every request.
            rng: Random source. Defaults to ``random.Random(policy.seed)``.
            recorder: Recorder for logging and events. Defaults to one
                backed by a NullSink.
        """
        self.policy = _build_if_needed(policy) if policy is not None else ChaosPolicy()
        self._environ = environ
        self._rng: RandomSource = (
            rng if rng is not None else random.Random(self.policy.seed)
        )
        self.recorder = recorder if recorder is not None else Recorder()

    def decide(self, method: str, path: str = "/") -> ChaosDecision:
        """Decide what to do with one request and record the decision."""
        decision = self._evaluate(method, path)
        self.recorder.record(decision, method, path)
        return decision

    def _evaluate(self, method: str, path: str) -> ChaosDecision:
        policy = self.policy

        if not policy.enabled:
            return ChaosDecision.proceed(SkipReason.DISABLED)

        if is_blocked_environment(policy, self._environ):
            return ChaosDecision.proceed(SkipReason.ENVIRONMENT)

        if not policy.allows_method(method):
            return ChaosDecision.proceed(SkipReason.METHOD)

        if policy.excludes_path(path):
            return ChaosDecision.proceed(SkipReason.PATH)

        inject_error = self._rng.random() < policy.error_rate

        if inject_error and not policy.delay_errors:
            return ChaosDecision.error(policy.error_status, policy.error_body)

        delay_ms = self._sample_latency()

        if inject_error:
            return ChaosDecision.error(
                policy.error_status, policy.error_body, delay_ms=delay_ms
            )
        if delay_ms is not None:
            return ChaosDecision.delay(delay_ms)
        return ChaosDecision.proceed(SkipReason.NOT_SAMPLED)

    def _sample_latency(self) -> float | None:
        """Pick a delay in milliseconds, or None if no latency applies."""
        policy = self.policy
        bounds = policy.latency_bounds
        if bounds is None:
            return None

        if policy.latency_rate < 1.0 and not self._rng.random() < policy.latency_rate:
            return None

        low, high = bounds
        if low == high:
            return low
        # Whole milliseconds, inclusive of both ends
        return float(math.floor(self._rng.random() * (high - low + 1) + low))
