"""
scaledtimer - Scaled Elapsed-Time Accumulator

A pausable stopwatch that tracks elapsed time under engine-driven, custom or
unscaled policies, advanced either per step or by lazy clock sampling, with
unit conversion and clock-style formatting.

Copyright (c) 2024 scaledtimer Contributors
Licensed under the MIT License.
"""

from .elapsed_timer import ElapsedTimer, ScaleMode, TrackingMode
from .exceptions import ConfigurationError, ScaledTimerError
from .formatting import TimeComponents, format_elapsed_us
from .global_scale import (
    GlobalTimeScale,
    default_scale_provider,
    get_global_scale,
    set_global_scale,
)
from .real_time_timer import RealTimeTimer
from .simulated_timer import SimulatedTimer
from .timer_config import TimerConfig
from .timing_base import ScaleProviderBase, TimerBase

__version__ = "1.0.0"
__author__ = "scaledtimer Contributors"
__license__ = "MIT"

__all__ = [
    "ElapsedTimer",
    "TrackingMode",
    "ScaleMode",
    "TimeComponents",
    "format_elapsed_us",
    "TimerConfig",
    "GlobalTimeScale",
    "default_scale_provider",
    "get_global_scale",
    "set_global_scale",
    "ScaledTimerError",
    "ConfigurationError",
    "TimerBase",
    "ScaleProviderBase",
    "RealTimeTimer",
    "SimulatedTimer",
]
