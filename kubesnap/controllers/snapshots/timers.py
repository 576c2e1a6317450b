"""Interval timers driving silent refresh cycles."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Protocol

logger = logging.getLogger(__name__)

TickCallback = Callable[[], Awaitable[None]]


class IntervalTimer(Protocol):
    """Handle for a running recurring timer."""

    def stop(self) -> None: ...


TimerFactory = Callable[[float, TickCallback], IntervalTimer]


class AsyncioIntervalTimer:
    """Recurring timer running on the current asyncio event loop.

    Each tick awaits the callback before sleeping again, so ticks of one timer
    never overlap. Stopping the timer never interrupts a running callback.
    """

    def __init__(self, interval_seconds: float, callback: TickCallback) -> None:
        self.interval_seconds = interval_seconds
        self._callback = callback
        self._stopped = False
        self._in_callback = False
        self._task = asyncio.get_running_loop().create_task(self._run())

    @property
    def active(self) -> bool:
        return not self._stopped and not self._task.done()

    async def _run(self) -> None:
        while not self._stopped:
            await asyncio.sleep(self.interval_seconds)
            if self._stopped:
                break
            self._in_callback = True
            try:
                await self._callback()
            except Exception:
                logger.exception("Timer callback failed")
            finally:
                self._in_callback = False

    def stop(self) -> None:
        """Stop the timer.

        A tick that is already running finishes and the loop then exits; only
        the sleep between ticks is cancelled.
        """
        self._stopped = True
        if not self._in_callback:
            self._task.cancel()


def asyncio_timer_factory(interval_seconds: float, callback: TickCallback) -> IntervalTimer:
    return AsyncioIntervalTimer(interval_seconds, callback)
