"""Tests for the pygame widgets (headless)."""
from __future__ import annotations

import math

import pygame
import pytest

from tick_countdown import CountdownStatus
from tick_countdown.palette import TEAL_DARK
from tick_countdown.render import SIZES, ring_frame
from tick_countdown.ui import Button, SegmentedSelector, draw_countdown, draw_ring
from tick_countdown.ui.ring import arc_points, band_polygon


@pytest.fixture(autouse=True)
def pygame_fonts():
    pygame.font.init()
    yield
    pygame.font.quit()


class TestGeometry:
    def test_arc_starts_at_twelve_oclock(self) -> None:
        points = arc_points((50, 50), 10, 0.0, math.pi / 2)
        assert points[0] == pytest.approx((50, 40))
        assert points[-1] == pytest.approx((60, 50))

    def test_pie_slice_includes_center(self) -> None:
        poly = band_polygon((0, 0), 10, 0, 0.0, math.pi)
        assert poly[0] == (0, 0)

    def test_band_has_inner_and_outer_edges(self) -> None:
        poly = band_polygon((0, 0), 10, 5, 0.0, math.pi)
        assert len(poly) % 2 == 0
        assert math.hypot(*poly[0]) == pytest.approx(10)
        assert math.hypot(*poly[-1]) == pytest.approx(5)


class TestDrawRing:
    def test_empty_ring_draws_only_track(self) -> None:
        surface = pygame.Surface((100, 100))
        draw_ring(surface, (50, 50), 96, 6, 0.0, 0.0, (255, 0, 0), (0, 0, 255))
        assert surface.get_at((50, 50 - 45))[:3] == (0, 0, 255)
        assert surface.get_at((50, 50))[:3] == (0, 0, 0)

    def test_full_sector_fills_disc(self) -> None:
        surface = pygame.Surface((100, 100))
        draw_ring(surface, (50, 50), 48, 48, 1.0, 0.0, (255, 0, 0), (0, 0, 255))
        assert surface.get_at((50, 50))[:3] == (255, 0, 0)

    def test_half_sector_covers_right_side(self) -> None:
        surface = pygame.Surface((100, 100))
        draw_ring(surface, (50, 50), 48, 48, 0.5, 0.0, (255, 0, 0), (0, 0, 255))
        assert surface.get_at((60, 50))[:3] == (255, 0, 0)
        assert surface.get_at((40, 50))[:3] == (0, 0, 255)

    def test_draw_countdown_renders_on_surface(self) -> None:
        surface = pygame.Surface((200, 200))
        surface.fill(TEAL_DARK.surface)
        frame = ring_frame(CountdownStatus(9, 500, True, True), TEAL_DARK)
        font = pygame.font.SysFont("sans", 30, bold=True)
        draw_countdown(surface, (100, 100), frame, SIZES["medium"], font,
                       TEAL_DARK.on_secondary_container)
        # Half the outer arc is swept; 12 o'clock lies inside the sweep
        assert surface.get_at((100, 55))[:3] == frame.colors.fg_track


class TestButton:
    def test_hit(self) -> None:
        button = Button(pygame.Rect(10, 10, 100, 40), "Restart", 24)
        assert button.hit((20, 20))
        assert not button.hit((200, 20))

    def test_draw(self) -> None:
        surface = pygame.Surface((200, 100))
        button = Button(pygame.Rect(10, 10, 100, 40), "Restart", 24)
        button.draw(surface, TEAL_DARK)
        assert surface.get_at((60, 30))[:3] != (0, 0, 0)


class TestSegmentedSelector:
    def _selector(self) -> SegmentedSelector[int]:
        return SegmentedSelector(
            pygame.Rect(0, 0, 400, 30), [15, 30, 45, 60],
            ["15s", "30s", "45s", "60s"], 0, 14,
        )

    def test_value_follows_selection(self) -> None:
        selector = self._selector()
        assert selector.value == 15
        assert selector.select(2) is True
        assert selector.value == 45

    def test_select_same_or_out_of_range(self) -> None:
        selector = self._selector()
        assert selector.select(0) is False
        assert selector.select(4) is False
        assert selector.select(-1) is False
        assert selector.selected == 0

    def test_hit_maps_to_segment(self) -> None:
        selector = self._selector()
        assert selector.hit((5, 5)) == 0
        assert selector.hit((150, 5)) == 1
        assert selector.hit((399, 29)) == 3
        assert selector.hit((5, 50)) is None

    def test_mismatched_labels(self) -> None:
        with pytest.raises(ValueError, match="same length"):
            SegmentedSelector(pygame.Rect(0, 0, 100, 30), [1, 2], ["a"], 0, 14)

    def test_bad_initial_selection(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            SegmentedSelector(pygame.Rect(0, 0, 100, 30), [1, 2], ["a", "b"], 2, 14)

    def test_draw(self) -> None:
        surface = pygame.Surface((400, 30))
        selector = self._selector()
        selector.draw(surface, TEAL_DARK)
        assert surface.get_at((50, 15))[:3] != (0, 0, 0)
