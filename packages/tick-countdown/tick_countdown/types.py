"""Shared value types for the countdown engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Mapping

FIELDS: tuple[str, ...] = ("days", "hours", "minutes", "seconds")


@dataclass(frozen=True, slots=True)
class RemainingTime:
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @property
    def total_seconds(self) -> int:
        return self.days * 86400 + self.hours * 3600 + self.minutes * 60 + self.seconds

    @property
    def is_zero(self) -> bool:
        return self.total_seconds == 0

    def as_dict(self) -> dict[str, int]:
        return {name: getattr(self, name) for name in FIELDS}


@dataclass(frozen=True, slots=True)
class FieldChanges:
    """Which fields differ from the previous sample."""

    days: bool = False
    hours: bool = False
    minutes: bool = False
    seconds: bool = False

    @property
    def any(self) -> bool:
        return self.days or self.hours or self.minutes or self.seconds

    def names(self) -> tuple[str, ...]:
        return tuple(name for name in FIELDS if getattr(self, name))


@dataclass(frozen=True, slots=True)
class Sample:
    remaining: RemainingTime
    changed: FieldChanges
    complete: bool


@dataclass(frozen=True, slots=True)
class Frame:
    """Everything the renderer needs for one display frame."""

    target: datetime
    remaining: RemainingTime
    pulses: Mapping[str, bool]
    font: str
    complete: bool
    samples: int


class TargetDateError(ValueError):
    """Raised when a month/day pair can never occur on the calendar."""
