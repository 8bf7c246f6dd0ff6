"""asyncio-backed tick scheduler."""

from __future__ import annotations

import asyncio
import logging

from .interface import Scheduler, TickCallback

logger = logging.getLogger(__name__)


class AsyncioScheduler(Scheduler):
    """Scheduler backed by a single background asyncio task.

    A failing tick is logged and the loop keeps going; the next interval is
    the retry. Use as an async context manager to guarantee the task is
    cancelled on exit:

        async with AsyncioScheduler() as scheduler:
            await scheduler.start(60.0, poller.tick)
            ...
    """

    def __init__(self, name: str = "pricing-ticker") -> None:
        self._name = name
        self._task: asyncio.Task | None = None

    async def start(self, interval: float, on_tick: TickCallback) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        if self.running:
            raise RuntimeError("scheduler already started")
        self._task = asyncio.create_task(self._run_loop(interval, on_tick), name=self._name)
        logger.info("Scheduler %s started: %.1fs interval", self._name, interval)

    async def stop(self) -> None:
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        self._task = None
        logger.info("Scheduler %s stopped", self._name)

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def __aenter__(self) -> AsyncioScheduler:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()

    async def _run_loop(self, interval: float, on_tick: TickCallback) -> None:
        """Sleep, tick, repeat."""
        while True:
            await asyncio.sleep(interval)
            try:
                await on_tick()
            except Exception:
                logger.exception("Scheduled tick failed")
