"""Countdown configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_FONTS: tuple[str, ...] = (
    "Helvetica",
    "Georgia",
    "Courier New",
    "Verdana",
    "Trebuchet MS",
    "Palatino",
    "Impact",
    "Garamond",
    "Futura",
    "Didot",
    "Rockwell",
    "Baskerville",
    "Gill Sans",
    "Optima",
)


@dataclass(frozen=True)
class CountdownConfig:
    """Immutable settings for one countdown display.

    Attributes:
        target_month: Calendar month of the target date (1-12).
        target_day: Day of month of the target date.
        sample_interval: Minimum seconds between two time samples.
        pulse_duration: Seconds a field stays highlighted after it changes.
        fonts: Ordered font names rotated through on every changed tick.
        cycle_fonts: When False, digits always use ``display_font``.
        display_font: Font for the title, labels and completion message.
        complete_message: Text shown once the target has been reached.
    """

    target_month: int = 4
    target_day: int = 11
    sample_interval: float = 0.25
    pulse_duration: float = 0.2
    fonts: tuple[str, ...] = DEFAULT_FONTS
    cycle_fonts: bool = True
    display_font: str = "Helvetica"
    complete_message: str = "Countdown complete"

    def __post_init__(self) -> None:
        if not 1 <= self.target_month <= 12:
            raise ValueError(f"target_month must be 1-12, got {self.target_month}")
        if self.sample_interval <= 0:
            raise ValueError("sample_interval must be positive")
        if self.pulse_duration < 0:
            raise ValueError("pulse_duration must not be negative")
        if not self.fonts:
            raise ValueError("fonts must not be empty")
