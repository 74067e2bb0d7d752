"""Clickable restart button and segmented selectors."""
from __future__ import annotations

from typing import Generic, Sequence, TypeVar

import pygame

from tick_countdown.palette import ColorScheme

T = TypeVar("T")


class Button:
    """Rounded push button with a text label."""

    def __init__(self, rect: pygame.Rect, label: str, font_size: int) -> None:
        self.rect = rect
        self.label = label
        self._font_size = font_size
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont("sans", self._font_size, bold=True)
        return self._font

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)

    def draw(self, surface: pygame.Surface, scheme: ColorScheme) -> None:
        pygame.draw.rect(surface, scheme.primary_container, self.rect,
                         border_radius=self.rect.height // 2)
        text = self._get_font().render(self.label, True, scheme.on_primary_container)
        surface.blit(text, text.get_rect(center=self.rect.center))


class SegmentedSelector(Generic[T]):
    """Row of equal-width segments with exactly one selected."""

    def __init__(
        self,
        rect: pygame.Rect,
        options: Sequence[T],
        labels: Sequence[str],
        selected: int,
        font_size: int,
    ) -> None:
        if len(options) != len(labels):
            raise ValueError("options and labels must have the same length")
        if not 0 <= selected < len(options):
            raise ValueError(f"selected index out of range: {selected}")
        self.rect = rect
        self._options = list(options)
        self._labels = list(labels)
        self.selected = selected
        self._font_size = font_size
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont("sans", self._font_size)
        return self._font

    @property
    def value(self) -> T:
        return self._options[self.selected]

    def __len__(self) -> int:
        return len(self._options)

    def segment_rect(self, index: int) -> pygame.Rect:
        w = self.rect.width // len(self._options)
        return pygame.Rect(self.rect.x + index * w, self.rect.y, w, self.rect.height)

    def hit(self, pos: tuple[int, int]) -> int | None:
        """Index of the segment under ``pos``, or None."""
        for i in range(len(self._options)):
            if self.segment_rect(i).collidepoint(pos):
                return i
        return None

    def select(self, index: int) -> bool:
        """Select a segment. Returns True if the selection changed."""
        if not 0 <= index < len(self._options) or index == self.selected:
            return False
        self.selected = index
        return True

    def draw(self, surface: pygame.Surface, scheme: ColorScheme) -> None:
        font = self._get_font()
        for i, label in enumerate(self._labels):
            seg = self.segment_rect(i)
            if i == self.selected:
                fill, ink = scheme.secondary_container, scheme.on_secondary_container
            else:
                fill, ink = scheme.surface, scheme.on_surface
            pygame.draw.rect(surface, fill, seg)
            pygame.draw.rect(surface, scheme.on_surface, seg, 1)
            text = font.render(label, True, ink)
            surface.blit(text, text.get_rect(center=seg.center))
