"""Countdown status snapshot and configuration errors."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CountdownStatus:
    """Read-only view of a countdown at one instant. Rebuilt on every read."""

    remaining_seconds: int
    within_second_ms: int
    is_in_danger_zone: bool
    is_running: bool


class InvalidConfiguration(ValueError):
    """Raised when a timer is configured with an impossible duration/threshold."""
