"""tick-countdown - Offset-based countdown timer with a pygame ring display."""
from __future__ import annotations

from tick_countdown.manager import CountdownManager, derive_status
from tick_countdown.ticker import Ticker
from tick_countdown.types import CountdownStatus, InvalidConfiguration

__all__ = [
    "CountdownManager",
    "CountdownStatus",
    "InvalidConfiguration",
    "Ticker",
    "derive_status",
]
