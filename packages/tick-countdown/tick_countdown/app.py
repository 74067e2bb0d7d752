"""Countdown Ring - pygame front end for CountdownManager.

Controls:
  Click Restart / R   Restart the countdown
  Space               Pause / Resume
  1-4                 Duration 15 / 30 / 45 / 60 seconds
  Click selectors     Change duration or ring size
  Esc                 Quit
"""
from __future__ import annotations

import logging
import sys
import time
from typing import Callable

import pygame

from tick_countdown.config import DURATION_CHOICES, TimerConfig, parse_args
from tick_countdown.manager import CountdownManager
from tick_countdown.palette import ColorScheme, label_color, scheme_for
from tick_countdown.render import SIZE_NAMES, SIZES, RingLayout, ring_frame
from tick_countdown.ticker import Ticker
from tick_countdown.types import CountdownStatus
from tick_countdown.ui.constants import (
    BUTTON_FONT_SIZE,
    BUTTON_H,
    BUTTON_W,
    BUTTON_Y,
    DURATION_Y,
    HINT_FONT_SIZE,
    RING_CENTER,
    SCREEN_H,
    SCREEN_W,
    SEGMENT_FONT_SIZE,
    SEGMENT_H,
    SEGMENT_W,
    SIZE_Y,
    STATUS_H,
)
from tick_countdown.ui.controls import Button, SegmentedSelector
from tick_countdown.ui.ring import draw_countdown

logger = logging.getLogger(__name__)

_DURATION_KEYS = {
    pygame.K_1: 0,
    pygame.K_2: 1,
    pygame.K_3: 2,
    pygame.K_4: 3,
}


class TimerApp:
    """Owns the countdown, its clock source, and the on-screen controls."""

    def __init__(
        self,
        config: TimerConfig,
        time_fn: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config
        self.scheme: ColorScheme = scheme_for(config.theme)
        self.manager = CountdownManager(
            total_seconds=config.total_seconds,
            danger_zone_seconds=config.danger_zone_seconds,
        )
        self.ticker = Ticker(self.manager.update, time_fn=time_fn)

        x = (SCREEN_W - SEGMENT_W) // 2
        self.restart_button = Button(
            pygame.Rect((SCREEN_W - BUTTON_W) // 2, BUTTON_Y, BUTTON_W, BUTTON_H),
            "Restart",
            BUTTON_FONT_SIZE,
        )
        self.duration_selector: SegmentedSelector[int] = SegmentedSelector(
            pygame.Rect(x, DURATION_Y, SEGMENT_W, SEGMENT_H),
            DURATION_CHOICES,
            [f"{s}s" for s in DURATION_CHOICES],
            DURATION_CHOICES.index(config.total_seconds),
            SEGMENT_FONT_SIZE,
        )
        self.size_selector: SegmentedSelector[str] = SegmentedSelector(
            pygame.Rect(x, SIZE_Y, SEGMENT_W, SEGMENT_H),
            SIZE_NAMES,
            [name.capitalize() for name in SIZE_NAMES],
            SIZE_NAMES.index(config.size),
            SEGMENT_FONT_SIZE,
        )
        self._fonts: dict[tuple[int, bool], pygame.font.Font] = {}

    @property
    def layout(self) -> RingLayout:
        return SIZES[self.size_selector.value]

    @property
    def status(self) -> CountdownStatus:
        return self.manager.status

    @property
    def now_ms(self) -> int:
        return self.ticker.last_ms

    # --- Lifecycle ---

    def open(self) -> None:
        """Start the clock source and, if configured, the countdown."""
        self.ticker.start()
        if self.config.autostart:
            self.manager.start(self.now_ms)

    def close(self) -> None:
        self.ticker.stop()

    def frame(self) -> CountdownStatus:
        """Advance the clock by one tick and return the fresh status."""
        self.ticker.tick()
        return self.manager.status

    # --- Actions ---

    def restart(self) -> None:
        logger.info("restart (%d s)", self.manager.total_seconds)
        self.manager.reset(self.now_ms)
        self.manager.start(self.now_ms)

    def toggle_pause(self) -> None:
        if self.manager.is_running:
            self.manager.pause(self.now_ms)
            logger.info("paused with %d s left", self.manager.status.remaining_seconds)
        elif self.manager.status.remaining_seconds > 0:
            self.manager.start(self.now_ms)
            logger.info("resumed with %d s left", self.manager.status.remaining_seconds)

    def select_duration(self, index: int) -> None:
        if self.duration_selector.select(index):
            seconds = self.duration_selector.value
            logger.info("duration set to %d s", seconds)
            self.manager.set_total_seconds(seconds)

    def select_size(self, index: int) -> None:
        if self.size_selector.select(index):
            logger.info("size set to %s", self.size_selector.value)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Apply one input event. Returns False when the app should quit."""
        if event.type == pygame.QUIT:
            return False

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_SPACE:
                self.toggle_pause()
            elif event.key == pygame.K_r:
                self.restart()
            elif event.key in _DURATION_KEYS:
                self.select_duration(_DURATION_KEYS[event.key])

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.restart_button.hit(event.pos):
                self.restart()
            else:
                index = self.duration_selector.hit(event.pos)
                if index is not None:
                    self.select_duration(index)
                index = self.size_selector.hit(event.pos)
                if index is not None:
                    self.select_size(index)
        return True

    # --- Render ---

    def _font(self, size: int, bold: bool = False) -> pygame.font.Font:
        key = (size, bold)
        if key not in self._fonts:
            self._fonts[key] = pygame.font.SysFont("sans", size, bold=bold)
        return self._fonts[key]

    def draw(self, surface: pygame.Surface) -> None:
        status = self.manager.status
        layout = self.layout
        surface.fill(self.scheme.surface)

        draw_countdown(
            surface,
            RING_CENTER,
            ring_frame(status, self.scheme),
            layout,
            self._font(layout.font_size, bold=True),
            label_color(self.scheme, status.is_in_danger_zone),
        )
        self.restart_button.draw(surface, self.scheme)
        self.duration_selector.draw(surface, self.scheme)
        self.size_selector.draw(surface, self.scheme)

        hint = "[R] Restart  [Space] Pause  [1-4] Duration  [Esc] Quit"
        text = self._font(HINT_FONT_SIZE).render(hint, True, self.scheme.on_surface)
        surface.blit(text, (8, SCREEN_H - STATUS_H // 2 - text.get_height() // 2))


def main(argv: list[str] | None = None) -> None:
    config, log_level = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info(
        "starting: %d s, danger zone %d s, size %s, theme %s",
        config.total_seconds,
        config.danger_zone_seconds,
        config.size,
        config.theme,
    )

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
        pygame.display.set_caption("Countdown timer")
        clock = pygame.time.Clock()

        app = TimerApp(config)
        app.open()
        running = True
        while running:
            clock.tick(config.fps)
            for event in pygame.event.get():
                if not app.handle_event(event):
                    running = False
                    break
            app.frame()
            app.draw(screen)
            pygame.display.flip()
        app.close()
    finally:
        pygame.quit()
    logger.info("stopped")


if __name__ == "__main__":
    main(sys.argv[1:])
