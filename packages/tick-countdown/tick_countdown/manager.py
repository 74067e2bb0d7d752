"""CountdownManager - offset-based countdown state machine."""
from __future__ import annotations

import logging

from tick_countdown.types import CountdownStatus, InvalidConfiguration

logger = logging.getLogger(__name__)


def derive_status(
    elapsed_ms: int,
    total_seconds: int,
    danger_zone_seconds: int,
    is_running: bool,
) -> CountdownStatus:
    """Compute a CountdownStatus from raw timing fields.

    Remaining seconds floor at 0 once the duration has been overshot;
    elapsed time itself is never clamped.
    """
    elapsed_seconds = elapsed_ms // 1000
    remaining_seconds = max(total_seconds - elapsed_seconds, 0)
    return CountdownStatus(
        remaining_seconds=remaining_seconds,
        within_second_ms=elapsed_ms % 1000,
        is_in_danger_zone=remaining_seconds < danger_zone_seconds,
        is_running=is_running,
    )


class CountdownManager:
    """Converts monotonic millisecond clock readings into countdown state.

    Time is tracked as an offset: while running, ``elapsed_ms`` is always
    ``now_ms - starting_ms`` for the latest ``update``. Repeating a tick with
    the same timestamp therefore changes nothing.
    """

    def __init__(self, total_seconds: int, danger_zone_seconds: int) -> None:
        if total_seconds <= 0:
            raise InvalidConfiguration(
                f"total_seconds must be positive: {total_seconds}"
            )
        if danger_zone_seconds < 0:
            raise InvalidConfiguration(
                f"danger_zone_seconds must not be negative: {danger_zone_seconds}"
            )
        if danger_zone_seconds >= total_seconds:
            raise InvalidConfiguration(
                "danger_zone_seconds must be smaller than total_seconds: "
                f"{danger_zone_seconds} vs {total_seconds}"
            )
        self._total_seconds = total_seconds
        self._danger_zone_seconds = danger_zone_seconds
        self._starting_ms = 0
        self._elapsed_ms = 0
        self._is_running = False

    # --- Configuration ---

    @property
    def total_seconds(self) -> int:
        return self._total_seconds

    @total_seconds.setter
    def total_seconds(self, value: int) -> None:
        self.set_total_seconds(value)

    @property
    def danger_zone_seconds(self) -> int:
        return self._danger_zone_seconds

    def set_total_seconds(self, value: int) -> None:
        """Change the duration live.

        Not checked against ``danger_zone_seconds`` and elapsed time is not
        rescaled. Takes effect on the next ``status`` read or ``update``.
        """
        logger.debug("total_seconds %d -> %d", self._total_seconds, value)
        self._total_seconds = value

    # --- Timing state ---

    @property
    def elapsed_ms(self) -> int:
        return self._elapsed_ms

    @property
    def starting_ms(self) -> int:
        return self._starting_ms

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def status(self) -> CountdownStatus:
        return derive_status(
            self._elapsed_ms,
            self._total_seconds,
            self._danger_zone_seconds,
            self._is_running,
        )

    # --- Mutators ---

    def start(self, now_ms: int) -> None:
        """Begin or resume a run segment from the current elapsed time."""
        self._is_running = True
        self._starting_ms = now_ms - self._elapsed_ms
        logger.debug("start at %d ms (elapsed %d ms)", now_ms, self._elapsed_ms)

    def pause(self, now_ms: int) -> None:
        """Advance to ``now_ms`` and then freeze elapsed time."""
        self.update(now_ms)
        self._is_running = False
        logger.debug("pause at %d ms (elapsed %d ms)", now_ms, self._elapsed_ms)

    def update(self, now_ms: int) -> None:
        """Recompute elapsed time from a clock tick. No-op while paused."""
        if not self._is_running:
            return
        self._elapsed_ms = now_ms - self._starting_ms
        if self._elapsed_ms // 1000 >= self._total_seconds:
            self._is_running = False
            logger.debug(
                "expired at %d ms (elapsed %d ms, total %d s)",
                now_ms,
                self._elapsed_ms,
                self._total_seconds,
            )

    def reset(self, now_ms: int) -> None:
        """Return to a fresh, paused timer with zero elapsed time."""
        self._starting_ms = now_ms
        self._elapsed_ms = 0
        self._is_running = False
        logger.debug("reset at %d ms", now_ms)
