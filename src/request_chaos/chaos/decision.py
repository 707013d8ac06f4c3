"""Result of evaluating a policy against one request."""

from __future__ import annotations

from dataclasses import dataclass

from request_chaos.types import ChaosAction, SkipReason


@dataclass(frozen=True)
class ChaosDecision:
    """What to do with a single request."""

    action: ChaosAction
    delay_ms: float | None = None
    status: int | None = None
    body: str = ""
    reason: SkipReason | None = None

    @classmethod
    def proceed(cls, reason: SkipReason) -> "ChaosDecision":
        """Pass the request through untouched."""
        return cls(action=ChaosAction.PROCEED, reason=reason)

    @classmethod
    def delay(cls, delay_ms: float) -> "ChaosDecision":
        """Delay the request, then pass it through."""
        return cls(action=ChaosAction.DELAY, delay_ms=delay_ms)

    @classmethod
    def error(
        cls, status: int, body: str = "", delay_ms: float | None = None
    ) -> "ChaosDecision":
        """Answer with a synthetic error, optionally after a delay."""
        action = ChaosAction.ERROR if delay_ms is None else ChaosAction.DELAY_THEN_ERROR
        return cls(action=action, delay_ms=delay_ms, status=status, body=body)

    @property
    def injects_latency(self) -> bool:
        return self.delay_ms is not None

    @property
    def injects_error(self) -> bool:
        return self.status is not None

    @property
    def is_passthrough(self) -> bool:
        return self.action == ChaosAction.PROCEED
