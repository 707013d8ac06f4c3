"""Decision recorder for request-chaos.

Recorder turns engine decisions into log lines and typed events:
- Logging goes to the ``request_chaos`` logger
- Events go to an EventSink (NullSink unless one is configured)
"""

from __future__ import annotations

import logging
from http import HTTPStatus

from request_chaos.chaos.decision import ChaosDecision
from request_chaos.events.sink import EventSink, NullSink
from request_chaos.events.types import (
    ErrorInjectedEvent,
    Event,
    LatencyInjectedEvent,
    RequestPassedEvent,
)

logger = logging.getLogger("request_chaos")


def _status_phrase(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return "Error"


class Recorder:
    """Logs and emits every decision the engine takes.

    Example:
        from request_chaos.events import JsonlSink

        recorder = Recorder(JsonlSink("chaos.jsonl"))
        engine = ChaosEngine(policy, recorder=recorder)
    """

    def __init__(self, sink: EventSink | None = None):
        """Initialize the recorder.

        Args:
            sink: EventSink for emitting events. Defaults to NullSink.
        """
        self._sink: EventSink = sink if sink is not None else NullSink()

    @property
    def sink(self) -> EventSink:
        """The event sink used for emission."""
        return self._sink

    def record(self, decision: ChaosDecision, method: str, path: str) -> None:
        """Record one decision.

        A failing sink is logged and never reaches the request being handled.
        """
        if decision.is_passthrough:
            reason = decision.reason.value if decision.reason else ""
            logger.debug("[Chaos] Passing %s %s through (%s)", method, path, reason)
            self._emit(RequestPassedEvent(method=method, path=path, reason=reason))
            return

        if decision.status is not None:
            logger.info(
                "[Chaos] Injecting a %d %s",
                decision.status,
                _status_phrase(decision.status),
            )
            self._emit(
                ErrorInjectedEvent(
                    method=method,
                    path=path,
                    status=decision.status,
                    delay_ms=decision.delay_ms,
                )
            )
        if decision.delay_ms is not None:
            logger.info("[Chaos] Delaying response by %gms...", decision.delay_ms)
            if decision.status is None:
                self._emit(
                    LatencyInjectedEvent(
                        method=method, path=path, delay_ms=decision.delay_ms
                    )
                )

    def _emit(self, event: Event) -> None:
        try:
            self._sink.emit(event)
        except Exception:
            logger.exception("[Chaos] Event sink %r failed", self._sink)

    def close(self) -> None:
        """Close the underlying sink."""
        self._sink.close()
