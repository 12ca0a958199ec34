"""tick-countdown - Tick-driven countdown to a fixed calendar date."""
from __future__ import annotations

from tick_countdown.clock import SampleClock
from tick_countdown.config import DEFAULT_FONTS, CountdownConfig
from tick_countdown.engine import CountdownEngine
from tick_countdown.fonts import FontCycle
from tick_countdown.layout import (
    Layout,
    UnitStyle,
    compute_layout,
    format_value,
    lerp_color,
    title_text,
    unit_style,
)
from tick_countdown.pulse import PulseTracker
from tick_countdown.sampler import TimeSampler, decompose
from tick_countdown.target import local_midnight, resolve_target
from tick_countdown.types import (
    FIELDS,
    FieldChanges,
    Frame,
    RemainingTime,
    Sample,
    TargetDateError,
)

__all__ = [
    "CountdownEngine",
    "CountdownConfig",
    "DEFAULT_FONTS",
    "TimeSampler",
    "decompose",
    "PulseTracker",
    "FontCycle",
    "SampleClock",
    "resolve_target",
    "local_midnight",
    "Layout",
    "UnitStyle",
    "compute_layout",
    "format_value",
    "lerp_color",
    "title_text",
    "unit_style",
    "FIELDS",
    "FieldChanges",
    "Frame",
    "RemainingTime",
    "Sample",
    "TargetDateError",
]
