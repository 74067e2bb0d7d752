"""Ticker - monotonic millisecond clock source for frame callbacks."""
from __future__ import annotations

import time
from typing import Callable

TickCallback = Callable[[int], None]


class Ticker:
    """Reports whole milliseconds elapsed since ``start()`` on every tick.

    The reported value never decreases, even if ``time_fn`` steps backwards.
    """

    def __init__(
        self,
        callback: TickCallback,
        time_fn: Callable[[], float] = time.monotonic,
    ) -> None:
        self._callback = callback
        self._time_fn = time_fn
        self._origin: float | None = None
        self._last_ms = 0

    @property
    def is_active(self) -> bool:
        return self._origin is not None

    @property
    def last_ms(self) -> int:
        return self._last_ms

    def start(self) -> None:
        if self._origin is not None:
            raise RuntimeError("Ticker already started")
        self._origin = self._time_fn()
        self._last_ms = 0

    def stop(self) -> None:
        self._origin = None

    def tick(self) -> int:
        if self._origin is None:
            raise RuntimeError("Ticker is not active")
        elapsed_ms = int((self._time_fn() - self._origin) * 1000)
        self._last_ms = max(self._last_ms, elapsed_ms)
        self._callback(self._last_ms)
        return self._last_ms
