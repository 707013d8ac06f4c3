"""Delay execution for sync and async hosts."""

from __future__ import annotations

import asyncio
import time


def sleep_ms(ms: float | None) -> None:
    """Block the calling thread for ``ms`` milliseconds."""
    if ms is None or ms <= 0:
        return
    time.sleep(ms / 1000)


async def async_sleep_ms(ms: float | None) -> None:
    """Suspend the current task for ``ms`` milliseconds."""
    if ms is None or ms <= 0:
        return
    await asyncio.sleep(ms / 1000)
