"""Core decision components."""

from request_chaos.core.delay import async_sleep_ms, sleep_ms
from request_chaos.core.engine import ChaosEngine
from request_chaos.core.recorder import Recorder

__all__ = ["ChaosEngine", "Recorder", "sleep_ms", "async_sleep_ms"]
