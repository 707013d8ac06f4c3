"""Event sink protocol and implementations for request-chaos.

EventSink provides a unified interface for event emission. Sinks can write to
JSONL files, collect in memory, or fan out to several sinks via MultiSink.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from request_chaos.events.types import Event

logger = logging.getLogger("request_chaos")


@runtime_checkable
class EventSink(Protocol):
    """Protocol for event sinks.

    Any class implementing this protocol can receive events from the engine.
    Examples include JSONL file writers or test collectors.
    """

    def emit(self, event: Event) -> None:
        """Emit an event to this sink.

        Args:
            event: The event to emit. Must be a subclass of BaseEvent.
        """
        ...

    def close(self) -> None:
        """Close the sink and release any resources.

        Implementations should flush buffered events before returning.
        """
        ...


class MultiSink:
    """Composite sink that broadcasts events to multiple sinks.

    Example:
        sink = MultiSink([JsonlSink("chaos.jsonl"), ListSink()])
        sink.emit(LatencyInjectedEvent(delay_ms=250))  # Goes to both
    """

    def __init__(self, sinks: list[EventSink] | None = None):
        """Initialize with a list of sinks.

        Args:
            sinks: List of sinks to broadcast to. Can be empty.
        """
        self._sinks: list[EventSink] = list(sinks) if sinks else []

    def add(self, sink: EventSink) -> None:
        """Add a sink to the broadcast list."""
        self._sinks.append(sink)

    def remove(self, sink: EventSink) -> None:
        """Remove a sink from the broadcast list. No error if not present."""
        try:
            self._sinks.remove(sink)
        except ValueError:
            pass

    def emit(self, event: Event) -> None:
        """Emit an event to all registered sinks.

        A failing sink is logged and skipped so the others still receive
        the event.
        """
        for sink in self._sinks:
            try:
                sink.emit(event)
            except Exception:
                logger.exception("[Chaos] Event sink %r failed", sink)

    def close(self) -> None:
        """Close all registered sinks."""
        for sink in self._sinks:
            try:
                sink.close()
            except Exception:
                logger.exception("[Chaos] Closing event sink %r failed", sink)

    def __len__(self) -> int:
        """Return the number of registered sinks."""
        return len(self._sinks)


class NullSink:
    """A sink that discards all events."""

    def emit(self, event: Event) -> None:
        pass

    def close(self) -> None:
        pass


class ListSink:
    """A sink that collects events into a list.

    Useful for testing and inspection.

    Example:
        sink = ListSink()
        engine = ChaosEngine(policy, recorder=Recorder(sink))
        engine.decide("GET", "/")
        assert len(sink.events) == 1
    """

    def __init__(self) -> None:
        self.events: list[Event] = []

    def emit(self, event: Event) -> None:
        """Append the event to the internal list."""
        self.events.append(event)

    def close(self) -> None:
        pass

    def clear(self) -> None:
        """Clear all collected events."""
        self.events.clear()

    def __len__(self) -> int:
        return len(self.events)
