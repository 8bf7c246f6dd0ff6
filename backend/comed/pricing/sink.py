"""Thread-safe in-memory display sink."""

from __future__ import annotations

from collections.abc import Mapping
from threading import Lock
from typing import Any

from .interface import DisplaySink


class RecordingSink(DisplaySink):
    """Keeps whatever was last written to the key.

    Hosts that render out-of-band (a preview window, a test harness) read the
    latest image, title, settings and state from here.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._image: str | None = None
        self._title: str | None = None
        self._settings: dict[str, Any] = {}
        self._state: int | None = None
        self._version: int = 0  # Bumped on every write

    async def set_image(self, data_uri: str) -> None:
        with self._lock:
            self._image = data_uri
            self._version += 1

    async def set_title(self, text: str) -> None:
        with self._lock:
            self._title = text
            self._version += 1

    async def set_settings(self, settings: Mapping[str, Any]) -> None:
        with self._lock:
            self._settings = dict(settings)
            self._version += 1

    async def set_state(self, state: int) -> None:
        with self._lock:
            self._state = state
            self._version += 1

    @property
    def image(self) -> str | None:
        with self._lock:
            return self._image

    @property
    def title(self) -> str | None:
        with self._lock:
            return self._title

    @property
    def settings(self) -> dict[str, Any]:
        """Copy of the last settings written. Empty until the first success."""
        with self._lock:
            return dict(self._settings)

    @property
    def state(self) -> int | None:
        with self._lock:
            return self._state

    @property
    def version(self) -> int:
        """Write counter. Useful for change detection."""
        return self._version
