"""PulseTracker - per-field highlight windows tracked as expiry timestamps."""
from __future__ import annotations

from typing import Iterable

from tick_countdown.types import FIELDS


class PulseTracker:
    """A field pulses from the moment it changes until ``duration`` later.

    Re-triggering a field replaces its expiry; nothing is cancelled or
    merged. Times are plain floats on whatever monotonic clock the caller uses.
    """

    def __init__(self, duration: float = 0.2) -> None:
        if duration < 0:
            raise ValueError("duration must not be negative")
        self._duration = duration
        self._expiry: dict[str, float] = {}

    @property
    def duration(self) -> float:
        return self._duration

    def trigger(self, field: str, now: float) -> None:
        if field not in FIELDS:
            raise ValueError(f"Unknown field {field!r}")
        self._expiry[field] = now + self._duration

    def trigger_all(self, fields: Iterable[str], now: float) -> None:
        for field in fields:
            self.trigger(field, now)

    def is_active(self, field: str, now: float) -> bool:
        expiry = self._expiry.get(field)
        return expiry is not None and now < expiry

    def expires_at(self, field: str) -> float | None:
        return self._expiry.get(field)

    def active(self, now: float) -> dict[str, bool]:
        return {name: self.is_active(name, now) for name in FIELDS}

    def clear(self) -> None:
        self._expiry.clear()
