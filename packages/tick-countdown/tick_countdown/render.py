"""Pure mapping from a CountdownStatus to drawing parameters."""
from __future__ import annotations

import math
from dataclasses import dataclass

from tick_countdown.palette import ColorScheme, RingColors, ring_colors
from tick_countdown.types import CountdownStatus


@dataclass(frozen=True)
class RingLayout:
    """Geometry for one size token (pixels)."""

    sector_diameter: int  # inner ring drawn as a filled sector
    arc_diameter: int  # outer thin arc
    arc_width: int
    font_size: int


SIZES: dict[str, RingLayout] = {
    "small": RingLayout(sector_diameter=32, arc_diameter=64, arc_width=4, font_size=20),
    "medium": RingLayout(sector_diameter=48, arc_diameter=96, arc_width=6, font_size=30),
    "large": RingLayout(sector_diameter=96, arc_diameter=192, arc_width=12, font_size=60),
}

SIZE_NAMES = list(SIZES)


@dataclass(frozen=True)
class RingFrame:
    """Everything needed to draw one frame of the countdown ring."""

    value: float
    rotation: float
    colors: RingColors
    text: str


def ring_value(status: CountdownStatus) -> float:
    """Fill fraction: sub-second progress while running, full otherwise."""
    if status.is_running:
        return status.within_second_ms / 1000
    return 1.0


def rotation_angle(status: CountdownStatus) -> float:
    """Ring rotation in radians; one half turn per 30 remaining seconds."""
    return -status.remaining_seconds / 30 * math.pi


def is_filling(status: CountdownStatus) -> bool:
    """Even seconds fill the ring, odd seconds empty it."""
    return status.is_running and status.remaining_seconds % 2 == 0


def label_text(remaining_seconds: int) -> str:
    if remaining_seconds == 0:
        return "0"
    return f"{remaining_seconds:02d}"


def ring_frame(status: CountdownStatus, scheme: ColorScheme) -> RingFrame:
    return RingFrame(
        value=ring_value(status),
        rotation=rotation_angle(status),
        colors=ring_colors(scheme, status.is_in_danger_zone, is_filling(status)),
        text=label_text(status.remaining_seconds),
    )
