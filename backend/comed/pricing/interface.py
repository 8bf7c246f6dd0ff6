"""Boundary interfaces between the pricing pipeline and its host."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

TickCallback = Callable[[], Awaitable[Any]]


class DisplaySink(ABC):
    """The slice of a key that the pricing pipeline writes to.

    The host adapts its own key/action object to this contract. Every tick
    overwrites what the previous tick wrote; there is no merging.
    """

    @abstractmethod
    async def set_image(self, data_uri: str) -> None:
        """Show an image, given as a `data:image/svg+xml,...` URI."""

    @abstractmethod
    async def set_title(self, text: str) -> None:
        """Set the key title. "" on success, "Error" on failure."""

    @abstractmethod
    async def set_settings(self, settings: Mapping[str, Any]) -> None:
        """Persist the latest snapshot as opaque key/value settings."""

    @abstractmethod
    async def set_state(self, state: int) -> None:
        """Select the key state: 0 = normal price, 1 = high price."""


class Scheduler(ABC):
    """Runs a tick callback on a fixed interval until stopped.

    Lifecycle:
        scheduler = AsyncioScheduler()
        await scheduler.start(60.0, poller.tick)
        # ... key is visible ...
        await scheduler.stop()
    """

    @abstractmethod
    async def start(self, interval: float, on_tick: TickCallback) -> None:
        """Begin calling `on_tick` every `interval` seconds.

        The first call happens one interval after start(). Must not be called
        again before stop().
        """

    @abstractmethod
    async def stop(self) -> None:
        """Cancel the schedule. Safe to call multiple times."""

    @property
    @abstractmethod
    def running(self) -> bool:
        """True while a schedule is active."""
