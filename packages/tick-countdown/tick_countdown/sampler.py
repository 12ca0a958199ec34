"""TimeSampler - remaining-time decomposition with per-field change detection."""
from __future__ import annotations

from datetime import datetime, timedelta

from tick_countdown.types import FIELDS, FieldChanges, RemainingTime, Sample

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

_ONE_MS = timedelta(milliseconds=1)

# Out of range for every field, so the first sample reports all as changed.
_UNSET = -1


def decompose(diff_ms: int) -> RemainingTime:
    """Split a millisecond difference into whole units, always flooring."""
    if diff_ms <= 0:
        return RemainingTime()
    return RemainingTime(
        days=diff_ms // MS_PER_DAY,
        hours=(diff_ms % MS_PER_DAY) // MS_PER_HOUR,
        minutes=(diff_ms % MS_PER_HOUR) // MS_PER_MINUTE,
        seconds=(diff_ms % MS_PER_MINUTE) // MS_PER_SECOND,
    )


class TimeSampler:
    """Samples the time left until a fixed target.

    Each call to :meth:`sample` compares against the values recorded by the
    previous call, so callers should sample at most once per tick. Once the
    target has been reached the sampler reports zero forever, even if the
    wall clock later moves backwards.
    """

    def __init__(self, target: datetime) -> None:
        self._target = target
        self._previous: dict[str, int] = {name: _UNSET for name in FIELDS}
        self._complete = False

    @property
    def target(self) -> datetime:
        return self._target

    @property
    def complete(self) -> bool:
        return self._complete

    def diff_ms(self, now: datetime) -> int:
        return (self._target - now) // _ONE_MS

    def sample(self, now: datetime) -> Sample:
        if not self._complete and self.diff_ms(now) <= 0:
            self._complete = True

        if self._complete:
            remaining = RemainingTime()
        else:
            remaining = decompose(self.diff_ms(now))

        values = remaining.as_dict()
        changed = FieldChanges(
            **{name: values[name] != self._previous[name] for name in FIELDS}
        )
        self._previous = values
        return Sample(remaining=remaining, changed=changed, complete=self._complete)
