"""Event system for request-chaos."""

from request_chaos.events.jsonl import JsonlSink, read_events
from request_chaos.events.sink import EventSink, ListSink, MultiSink, NullSink
from request_chaos.events.types import (
    BaseEvent,
    ErrorInjectedEvent,
    Event,
    LatencyInjectedEvent,
    RequestPassedEvent,
)

__all__ = [
    "BaseEvent",
    "Event",
    "LatencyInjectedEvent",
    "ErrorInjectedEvent",
    "RequestPassedEvent",
    "EventSink",
    "MultiSink",
    "NullSink",
    "ListSink",
    "JsonlSink",
    "read_events",
]
