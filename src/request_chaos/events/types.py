"""Pydantic event models for request-chaos.

Every decision the engine takes can be emitted as one of these events. They
share a consistent schema so journals can be read back or consumed by other
tools.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BaseEvent(BaseModel):
    """Base class for all events."""

    timestamp: datetime = Field(default_factory=_utc_now)
    method: str = ""
    path: str = ""

    model_config = {"extra": "allow"}


class LatencyInjectedEvent(BaseEvent):
    """Emitted when a request is delayed."""

    type: Literal["latency_injected"] = "latency_injected"
    delay_ms: float = 0.0


class ErrorInjectedEvent(BaseEvent):
    """Emitted when a request is answered with a synthetic error."""

    type: Literal["error_injected"] = "error_injected"
    status: int = 500
    delay_ms: float | None = None


class RequestPassedEvent(BaseEvent):
    """Emitted when a request goes through untouched."""

    type: Literal["request_passed"] = "request_passed"
    reason: str = ""


# Union of all event types for type checking
Event = Annotated[
    Union[
        LatencyInjectedEvent,
        ErrorInjectedEvent,
        RequestPassedEvent,
    ],
    Field(discriminator="type"),
]
