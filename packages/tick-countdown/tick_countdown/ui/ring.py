"""Countdown ring and label renderer."""
from __future__ import annotations

import math

import pygame

from tick_countdown.palette import Color
from tick_countdown.render import RingFrame, RingLayout
from tick_countdown.ui.constants import ARC_STEPS

Point = tuple[float, float]


def arc_points(center: Point, radius: float, start: float, sweep: float) -> list[Point]:
    """Points along an arc, angles in radians clockwise from 12 o'clock."""
    cx, cy = center
    steps = max(2, int(ARC_STEPS * abs(sweep) / math.tau) + 1)
    points = []
    for i in range(steps + 1):
        a = start + sweep * i / steps
        points.append((cx + radius * math.sin(a), cy - radius * math.cos(a)))
    return points


def band_polygon(
    center: Point,
    outer: float,
    inner: float,
    start: float,
    sweep: float,
) -> list[Point]:
    """Closed outline of an annular sector; a pie slice when inner is 0."""
    outside = arc_points(center, outer, start, sweep)
    if inner <= 0:
        return [center, *outside]
    inside = arc_points(center, inner, start, sweep)
    return outside + inside[::-1]


def draw_ring(
    surface: pygame.Surface,
    center: Point,
    diameter: int,
    stroke: int,
    value: float,
    rotation: float,
    progress_color: Color,
    track_color: Color,
) -> None:
    """Draw a progress ring: full track, then the progress sweep on top.

    The stroke is centred on radius ``(diameter - stroke) / 2``, so a stroke
    equal to the diameter yields a filled disc.
    """
    radius = (diameter - stroke) / 2
    outer = radius + stroke / 2
    inner = max(radius - stroke / 2, 0)
    cx, cy = center

    pygame.draw.circle(surface, track_color, (round(cx), round(cy)), round(outer),
                       0 if inner == 0 else stroke)
    if value <= 0:
        return
    if value >= 1:
        pygame.draw.circle(surface, progress_color, (round(cx), round(cy)), round(outer),
                           0 if inner == 0 else stroke)
        return
    poly = band_polygon(center, outer, inner, rotation, value * math.tau)
    pygame.draw.polygon(surface, progress_color, poly)


def draw_countdown(
    surface: pygame.Surface,
    center: Point,
    frame: RingFrame,
    layout: RingLayout,
    font: pygame.font.Font,
    text_color: Color,
) -> None:
    """Draw the sector ring, the outer arc ring, and the centred label."""
    colors = frame.colors
    # Sector ring: stroke equals diameter
    draw_ring(surface, center, layout.sector_diameter, layout.sector_diameter,
              frame.value, frame.rotation, colors.bg_track, colors.bg_fill)
    # Arc ring
    draw_ring(surface, center, layout.arc_diameter, layout.arc_width,
              frame.value, frame.rotation, colors.fg_track, colors.fg_fill)

    label = font.render(frame.text, True, text_color)
    surface.blit(label, label.get_rect(center=(round(center[0]), round(center[1]))))
