"""Tick schedulers.

A scheduler owns the clock and nothing else: it calls the simulator's
tick callback periodically. The callback is awaited before the next
period starts, so ticks never overlap.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Awaitable, Callable
from typing import Protocol

_logger = logging.getLogger(__name__)

TickCallback = Callable[[], Awaitable[object]]


class TickScheduler(Protocol):
    @property
    def is_running(self) -> bool: ...

    async def start(self, callback: TickCallback) -> None: ...

    async def stop(self) -> None: ...


class AsyncioTickScheduler:
    """Fixed-period scheduler backed by an asyncio task."""

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._interval = interval
        self._task: asyncio.Task[None] | None = None

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self, callback: TickCallback) -> None:
        if self.is_running:
            return
        self._reap()
        self._task = asyncio.get_running_loop().create_task(self._run(callback), name="pyrecyclemap-tick")

    async def stop(self) -> None:
        """Cancel the timer and wait for it to unwind.

        A tick still waiting for its turn is dropped. An error that ended
        the loop early is re-raised here.
        """
        task = self._task
        self._task = None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def _run(self, callback: TickCallback) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                await callback()
            except asyncio.CancelledError:
                raise
            except Exception:
                _logger.exception("Tick failed; stopping scheduler")
                raise

    def _reap(self) -> None:
        """Drop a loop that already ended on an error. The error was logged when it happened."""
        task = self._task
        self._task = None
        if task is not None and task.done() and not task.cancelled():
            task.exception()


class ManualTickScheduler:
    """Test-controlled clock: ticks happen only when :meth:`advance` is awaited."""

    def __init__(self) -> None:
        self._callback: TickCallback | None = None

    @property
    def is_running(self) -> bool:
        return self._callback is not None

    async def start(self, callback: TickCallback) -> None:
        self._callback = callback

    async def stop(self) -> None:
        self._callback = None

    async def advance(self, ticks: int = 1) -> int:
        """Run ``ticks`` ticks back to back. Returns how many actually ran."""
        ran = 0
        for _ in range(ticks):
            callback = self._callback
            if callback is None:
                break
            await callback()
            ran += 1
        return ran
