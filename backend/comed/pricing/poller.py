"""Pricing tick orchestration and key lifecycle."""

from __future__ import annotations

import logging
import time
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

from .classifier import classify_state
from .errors import PricingError
from .feeds import ComedFeedClient
from .formatter import format_price
from .interface import DisplaySink, Scheduler
from .models import NOT_AVAILABLE, PriceSample, PricingOutcome, PricingSnapshot
from .renderer import render_error_svg, render_pricing_svg, svg_data_uri
from .scheduler import AsyncioScheduler
from .trend import calculate_trend

logger = logging.getLogger(__name__)

ERROR_TITLE = "Error"


def build_snapshot(
    five_minute: list[PriceSample],
    hourly: list[PriceSample],
    last_update: int,
) -> PricingSnapshot:
    """Derive prices, trend and state from newest-first feed samples."""
    current = five_minute[0].price_cents if five_minute else NOT_AVAILABLE
    previous = five_minute[1].price_cents if len(five_minute) > 1 else None
    hourly_price = hourly[0].price_cents if hourly else NOT_AVAILABLE

    return PricingSnapshot(
        five_min_price=current,
        previous_five_min_price=previous,
        hourly_price=hourly_price,
        five_min_formatted=format_price(current),
        hourly_formatted=format_price(hourly_price),
        trend=calculate_trend(previous, current),
        state=classify_state(current),
        last_update=last_update,
    )


class PricingPoller:
    """Runs one fetch -> compute -> render -> emit cycle per tick() call.

    Ticks may overlap (timer and manual refresh); each writes the sink in
    full, so whichever finishes last is what the key shows.
    """

    def __init__(
        self,
        sink: DisplaySink,
        feeds: ComedFeedClient,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._sink = sink
        self._feeds = feeds
        self._clock = clock

    async def tick(self) -> PricingOutcome:
        """Update the key. Never raises; failures render the error icon."""
        try:
            five_minute, hourly = await self._feeds.fetch_feeds()
            snapshot = build_snapshot(five_minute, hourly, int(self._clock() * 1000))
            image = svg_data_uri(
                render_pricing_svg(
                    snapshot.five_min_formatted,
                    snapshot.hourly_formatted,
                    snapshot.five_min_price,
                    snapshot.trend,
                )
            )

            await self._sink.set_image(image)
            await self._sink.set_title("")
            await self._sink.set_settings(snapshot.to_settings())
            await self._sink.set_state(int(snapshot.state))
        except PricingError as e:
            logger.warning("Pricing update failed: %s", e)
            return await self._emit_error(str(e))
        except Exception as e:
            logger.exception("Unexpected error during pricing update")
            return await self._emit_error(str(e) or type(e).__name__)

        logger.debug(
            "Pricing updated: %s (%s, %s), hourly %s",
            snapshot.five_min_formatted,
            snapshot.trend.value,
            snapshot.state.name.lower(),
            snapshot.hourly_formatted,
        )
        return PricingOutcome(ok=True, image=image, title="", snapshot=snapshot)

    async def _emit_error(self, message: str) -> PricingOutcome:
        image = svg_data_uri(render_error_svg())
        try:
            await self._sink.set_title(ERROR_TITLE)
            await self._sink.set_image(image)
        except Exception:
            logger.exception("Failed to show error icon")
        return PricingOutcome(ok=False, image=image, title=ERROR_TITLE, error=message)


class PricingAction:
    """Host-facing key action: refresh on appear, on a timer, and on key press.

    The host calls the on_* hooks with a DisplaySink wrapping its key object.
    The scheduler is created per appearance and torn down on disappear.
    """

    def __init__(
        self,
        feeds: ComedFeedClient,
        interval: float = 60.0,
        scheduler_factory: Callable[[], Scheduler] = AsyncioScheduler,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._feeds = feeds
        self._interval = interval
        self._scheduler_factory = scheduler_factory
        self._clock = clock
        self._scheduler: Scheduler | None = None
        self._generation: int = 0  # Bumped on every appear and disappear

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._scheduler is not None and self._scheduler.running

    async def on_will_appear(self, sink: DisplaySink) -> PricingOutcome:
        """Show prices right away, then keep them fresh every interval.

        If the key disappears (or appears again) while the first tick is in
        flight, this appearance is stale and no schedule is started.
        """
        await self.on_will_disappear()
        self._generation += 1
        generation = self._generation

        poller = self._poller(sink)
        outcome = await poller.tick()
        if generation != self._generation:
            logger.debug("Key changed during initial tick; not scheduling")
            return outcome

        scheduler = self._scheduler_factory()
        self._scheduler = scheduler
        await scheduler.start(self._interval, poller.tick)
        if generation != self._generation:
            await scheduler.stop()
        return outcome

    async def on_key_down(self, sink: DisplaySink) -> PricingOutcome:
        """Manual refresh."""
        return await self._poller(sink).tick()

    async def on_will_disappear(self) -> None:
        self._generation += 1
        scheduler, self._scheduler = self._scheduler, None
        if scheduler is not None:
            await scheduler.stop()

    @asynccontextmanager
    async def attached(self, sink: DisplaySink) -> AsyncIterator[PricingAction]:
        """Appear for the duration of the block; always disappears on exit."""
        await self.on_will_appear(sink)
        try:
            yield self
        finally:
            await self.on_will_disappear()

    def _poller(self, sink: DisplaySink) -> PricingPoller:
        return PricingPoller(sink=sink, feeds=self._feeds, clock=self._clock)
