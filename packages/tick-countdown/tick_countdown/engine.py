"""CountdownEngine - owns countdown state and drives the sample/render loop."""
from __future__ import annotations

import logging
import time
from datetime import datetime, tzinfo
from types import MappingProxyType
from typing import Callable

from tick_countdown.clock import SampleClock
from tick_countdown.config import CountdownConfig
from tick_countdown.fonts import FontCycle
from tick_countdown.pulse import PulseTracker
from tick_countdown.sampler import TimeSampler
from tick_countdown.target import resolve_target
from tick_countdown.types import Frame, Sample

logger = logging.getLogger(__name__)

SampleHook = Callable[[Sample], None]


def _local_now() -> datetime:
    return datetime.now().astimezone()


class CountdownEngine:
    """One independent countdown.

    The host calls :meth:`frame` once per display frame. Time is re-sampled
    only when the sample clock allows it; every other frame reuses the last
    sample, with pulse flags evaluated against the current monotonic time.
    The target is resolved once here and never re-evaluated.
    """

    def __init__(
        self,
        config: CountdownConfig | None = None,
        wall_clock: Callable[[], datetime] | None = None,
        monotonic: Callable[[], float] | None = None,
        tz: tzinfo | None = None,
    ) -> None:
        self._config = config if config is not None else CountdownConfig()
        self._wall_clock = wall_clock if wall_clock is not None else _local_now
        self._monotonic = monotonic if monotonic is not None else time.monotonic

        self._target = resolve_target(
            self._wall_clock(),
            self._config.target_month,
            self._config.target_day,
            tz,
        )
        self._sampler = TimeSampler(self._target)
        self._clock = SampleClock(self._config.sample_interval)
        self._pulses = PulseTracker(self._config.pulse_duration)
        self._fonts: FontCycle | None = None
        if self._config.cycle_fonts:
            self._fonts = FontCycle(self._config.fonts)

        self._last_sample: Sample | None = None
        self._change_hooks: list[SampleHook] = []
        self._complete_hooks: list[SampleHook] = []
        self._completion_reported = False

    @property
    def config(self) -> CountdownConfig:
        return self._config

    @property
    def target(self) -> datetime:
        return self._target

    @property
    def last_sample(self) -> Sample | None:
        return self._last_sample

    @property
    def complete(self) -> bool:
        return self._sampler.complete

    @property
    def samples(self) -> int:
        return self._clock.samples

    @property
    def font(self) -> str:
        if self._fonts is None:
            return self._config.display_font
        return self._fonts.current

    @property
    def pulses(self) -> PulseTracker:
        return self._pulses

    def on_change(self, hook: SampleHook) -> None:
        self._change_hooks.append(hook)

    def on_complete(self, hook: SampleHook) -> None:
        self._complete_hooks.append(hook)

    def _sample(self, mono: float) -> Sample:
        sample = self._sampler.sample(self._wall_clock())
        self._clock.mark(mono)
        self._last_sample = sample

        if sample.changed.any:
            self._pulses.trigger_all(sample.changed.names(), mono)
            if self._fonts is not None:
                self._fonts.advance()
            for hook in self._change_hooks:
                hook(sample)

        if sample.complete and not self._completion_reported:
            self._completion_reported = True
            logger.info("countdown to %s complete", self._target.isoformat())
            for hook in self._complete_hooks:
                hook(sample)

        return sample

    def step(self) -> Sample:
        """Sample immediately, ignoring the throttle."""
        return self._sample(self._monotonic())

    def frame(self, now_mono: float | None = None) -> Frame:
        mono = self._monotonic() if now_mono is None else now_mono
        if self._clock.ready(mono):
            self._sample(mono)

        sample = self._last_sample
        assert sample is not None
        return Frame(
            target=self._target,
            remaining=sample.remaining,
            pulses=MappingProxyType(self._pulses.active(mono)),
            font=self.font,
            complete=sample.complete,
            samples=self._clock.samples,
        )
