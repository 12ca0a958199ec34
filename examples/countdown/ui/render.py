"""Countdown frame renderer: gradient, title, digit groups, separators."""
from __future__ import annotations

from functools import lru_cache

import pygame

from tick_countdown import (
    FIELDS,
    Frame,
    Layout,
    compute_layout,
    format_value,
    lerp_color,
    title_text,
    unit_style,
)
from tick_countdown.layout import LABEL_ALPHA, SEPARATOR_ALPHA
from ui.constants import GRADIENT_BOTTOM, GRADIENT_TOP, SEPARATOR, TEXT_COLOR, UNIT_LABELS


@lru_cache(maxsize=128)
def get_font(name: str, size: int) -> pygame.font.Font:
    """Bold system font, cached per (name, size). Unknown names fall back to pygame's default."""
    return pygame.font.SysFont(name, max(1, size), bold=True)


def _blit_centered(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    center: tuple[float, float],
    alpha: int = 255,
) -> None:
    label = font.render(text, True, TEXT_COLOR)
    if alpha < 255:
        label.set_alpha(alpha)
    surface.blit(label, label.get_rect(center=(round(center[0]), round(center[1]))))


class Background:
    """Vertical gradient, rebuilt only when the surface size changes."""

    def __init__(self) -> None:
        self._size: tuple[int, int] | None = None
        self._surface: pygame.Surface | None = None

    def invalidate(self) -> None:
        self._size = None
        self._surface = None

    def _build(self, size: tuple[int, int]) -> pygame.Surface:
        width, height = size
        gradient = pygame.Surface(size)
        for y in range(height):
            t = y / (height - 1) if height > 1 else 0.0
            pygame.draw.line(
                gradient, lerp_color(GRADIENT_TOP, GRADIENT_BOTTOM, t), (0, y), (width, y)
            )
        return gradient

    def draw(self, surface: pygame.Surface) -> None:
        size = surface.get_size()
        if self._surface is None or self._size != size:
            self._surface = self._build(size)
            self._size = size
        surface.blit(self._surface, (0, 0))


def draw_time_unit(
    surface: pygame.Surface,
    layout: Layout,
    center: tuple[float, float],
    value: int,
    label: str,
    font_name: str,
    label_font: str,
    pulsing: bool,
) -> None:
    """Draw one digit group; a pulsing group is enlarged and faded."""
    style = unit_style(pulsing)
    x, y = center

    digits = get_font(font_name, round(layout.digit_size * style.scale))
    _blit_centered(
        surface, digits, format_value(value), (x, y + layout.digit_offset(style.scale)), style.alpha
    )

    caption = get_font(label_font, round(layout.label_size * style.scale))
    _blit_centered(
        surface, caption, label, (x, y + layout.label_offset(style.scale)), LABEL_ALPHA
    )


def draw_separator(
    surface: pygame.Surface, layout: Layout, center: tuple[float, float], font_name: str
) -> None:
    font = get_font(font_name, round(layout.separator_size))
    _blit_centered(surface, font, SEPARATOR, center, SEPARATOR_ALPHA)


def draw_frame(
    surface: pygame.Surface,
    frame: Frame,
    background: Background,
    display_font: str,
    complete_message: str,
) -> None:
    """Draw a full countdown frame from an engine snapshot."""
    layout = compute_layout(*surface.get_size())
    background.draw(surface)

    title_font = get_font(display_font, round(layout.title_size))
    _blit_centered(surface, title_font, title_text(frame.target), layout.title_pos)

    if frame.complete:
        done_font = get_font(display_font, round(layout.complete_size))
        _blit_centered(surface, done_font, complete_message, layout.complete_pos)

    values = frame.remaining.as_dict()
    for name, center in zip(FIELDS, layout.unit_centers):
        draw_time_unit(
            surface,
            layout,
            center,
            values[name],
            UNIT_LABELS[name],
            frame.font,
            display_font,
            frame.pulses[name],
        )
    for center in layout.separator_centers:
        draw_separator(surface, layout, center, display_font)
