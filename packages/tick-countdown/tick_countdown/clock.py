"""SampleClock - throttles time sampling to a fixed minimum interval."""
from __future__ import annotations


class SampleClock:
    """Watermark on a monotonic clock: at most one sample per ``interval``.

    Frames that arrive early are simply skipped; there is no catch-up after
    a stall, so a long pause yields one sample, not a burst.
    """

    def __init__(self, interval: float = 0.25) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._interval = interval
        self._last: float | None = None
        self._samples = 0

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def last(self) -> float | None:
        return self._last

    @property
    def samples(self) -> int:
        return self._samples

    def ready(self, now: float) -> bool:
        return self._last is None or now - self._last >= self._interval

    def mark(self, now: float) -> int:
        self._last = now
        self._samples += 1
        return self._samples

    def reset(self) -> None:
        self._last = None
        self._samples = 0
