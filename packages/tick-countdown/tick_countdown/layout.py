"""Resolution-independent layout and styling for the countdown display.

Everything here is a pure function of the surface size or the frame state,
so the pygame side only has to blit what these functions describe. All sizes
scale with ``min(width, height)``.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

Color = tuple[int, int, int]

TITLE_Y = 0.15
COMPLETE_Y = 0.85
TITLE_SCALE = 0.04
COMPLETE_SCALE = 0.05
DIGIT_SCALE = 0.12
LABEL_SCALE = 0.025
SPACING_SCALE = 0.15
SEPARATOR_SCALE = 0.6

PULSE_SCALE = 1.1
PULSE_ALPHA = 180
LABEL_ALPHA = 230
SEPARATOR_ALPHA = 180


def format_value(value: int, width: int = 2) -> str:
    """Zero-pad to at least ``width`` digits; longer values are kept whole."""
    return f"{value:0{width}d}"


def title_text(target: datetime) -> str:
    return f"Countdown to {target:%B} {target.day}, {target.year}"


@dataclass(frozen=True, slots=True)
class UnitStyle:
    scale: float
    alpha: int


def unit_style(pulsing: bool) -> UnitStyle:
    if pulsing:
        return UnitStyle(scale=PULSE_SCALE, alpha=PULSE_ALPHA)
    return UnitStyle(scale=1.0, alpha=255)


@dataclass(frozen=True, slots=True)
class Layout:
    width: int
    height: int
    unit: float
    title_pos: tuple[float, float]
    title_size: float
    complete_pos: tuple[float, float]
    complete_size: float
    digit_size: float
    label_size: float
    separator_size: float
    unit_centers: tuple[tuple[float, float], ...]
    separator_centers: tuple[tuple[float, float], ...]

    def digit_offset(self, scale: float) -> float:
        """Vertical offset of the digits from a unit's center."""
        return -self.label_size * 2 * scale

    def label_offset(self, scale: float) -> float:
        """Vertical offset of the label from a unit's center."""
        return self.digit_size * 0.4 * scale


def compute_layout(width: int, height: int, groups: int = 4) -> Layout:
    """Compute text positions and sizes for a ``width`` x ``height`` surface."""
    unit = float(min(width, height))
    cx = width / 2
    cy = height / 2
    spacing = unit * SPACING_SCALE
    digit_size = unit * DIGIT_SCALE

    first = -(groups - 1) / 2
    centers = tuple((cx + spacing * (first + i), cy) for i in range(groups))
    # Separators sit midway between adjacent groups.
    separators = tuple(
        ((a[0] + b[0]) / 2, cy) for a, b in zip(centers, centers[1:])
    )

    return Layout(
        width=width,
        height=height,
        unit=unit,
        title_pos=(cx, height * TITLE_Y),
        title_size=unit * TITLE_SCALE,
        complete_pos=(cx, height * COMPLETE_Y),
        complete_size=unit * COMPLETE_SCALE,
        digit_size=digit_size,
        label_size=unit * LABEL_SCALE,
        separator_size=digit_size * SEPARATOR_SCALE,
        unit_centers=centers,
        separator_centers=separators,
    )


def lerp_color(top: Color, bottom: Color, t: float) -> Color:
    """Linear interpolation between two RGB colors, ``t`` clamped to [0, 1]."""
    t = max(0.0, min(1.0, t))
    r = round(top[0] + (bottom[0] - top[0]) * t)
    g = round(top[1] + (bottom[1] - top[1]) * t)
    b = round(top[2] + (bottom[2] - top[2]) * t)
    return (r, g, b)
