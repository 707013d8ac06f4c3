"""Core type definitions for request-chaos.

This module contains enums and type aliases used across the codebase.
"""

from __future__ import annotations

from enum import Enum


class ChaosAction(str, Enum):
    """What the engine decided to do with a request."""

    PROCEED = "proceed"  # Pass through untouched
    DELAY = "delay"  # Sleep, then pass through
    ERROR = "error"  # Answer with a synthetic error, skip downstream
    DELAY_THEN_ERROR = "delay_then_error"  # Sleep, then answer with an error


class SkipReason(str, Enum):
    """Why a request passed through without chaos."""

    DISABLED = "disabled"
    ENVIRONMENT = "environment"
    METHOD = "method"
    PATH = "path"
    NOT_SAMPLED = "not_sampled"


# Fixed delay in milliseconds, or an inclusive (min, max) range
Latency = float | tuple[int, int]
