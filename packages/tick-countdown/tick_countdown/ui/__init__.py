"""pygame widgets for the countdown app."""
from __future__ import annotations

from tick_countdown.ui.controls import Button, SegmentedSelector
from tick_countdown.ui.ring import draw_countdown, draw_ring

__all__ = ["Button", "SegmentedSelector", "draw_countdown", "draw_ring"]
