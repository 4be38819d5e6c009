"""
ElapsedTimer - Scaled Elapsed-Time Accumulator

This module provides a pausable stopwatch that accumulates elapsed time under a
configurable scaling policy. Time can be advanced either by the application's
step loop (delta accumulation) or lazily from a monotonic clock whenever the
value is read (timestamp sampling). The application decides which.
"""

from enum import IntEnum, IntFlag
from typing import Optional

from loguru import logger

from .formatting import (
    US_PER_DAY,
    US_PER_HOUR,
    US_PER_MINUTE,
    US_PER_MS,
    US_PER_SECOND,
    TimeComponents,
)
from .global_scale import default_scale_provider, validate_scale
from .real_time_timer import RealTimeTimer
from .timing_base import ScaleProviderBase, TimerBase


class TrackingMode(IntEnum):
    """How elapsed time is advanced."""

    DELTA_ACCUMULATION = 0  # Advanced by tick(delta) from the step loop
    TIMESTAMP_SAMPLING = 1  # Advanced from clock differences on every read


class ScaleMode(IntFlag):
    """Which multipliers apply to raw time. Flags stack multiplicatively."""

    NONE = 0  # Unscaled real time
    GLOBAL = 1  # Follow the global time scale provider
    CUSTOM = 2  # Apply the timer's own custom scale


class ElapsedTimer:
    """
    Scaled elapsed-time accumulator with pause/resume.

    Every change that depends on "time elapsed under the old configuration"
    (pause, mode switch, scale change, observed global scale change) first
    reconciles pending time against the old configuration, then applies the
    new one.

    Usage pattern (step driven):
        timer = ElapsedTimer(scale_mode=ScaleMode.GLOBAL)
        timer.start()

        # In game loop:
        timer.tick(delta_seconds)
        label = timer.formatted_string()

    Usage pattern (clock sampled):
        timer = ElapsedTimer(tracking_mode=TrackingMode.TIMESTAMP_SAMPLING)
        timer.start()
        ...
        seconds = timer.elapsed_seconds()
    """

    def __init__(
        self,
        tracking_mode: TrackingMode = TrackingMode.DELTA_ACCUMULATION,
        scale_mode: ScaleMode = ScaleMode.GLOBAL,
        custom_scale: float = 1.0,
        autostart: bool = False,
        pause_on_reset: bool = True,
        timer: Optional[TimerBase] = None,
        scale_provider: Optional[ScaleProviderBase] = None,
    ):
        """
        Initialize the timer paused at zero.

        Args:
            tracking_mode: Advancement strategy
            scale_mode: Enabled scale factors
            custom_scale: Timer-local multiplier used when CUSTOM is enabled
            autostart: Start immediately after construction
            pause_on_reset: Force the timer paused whenever reset() is called
            timer: Monotonic clock source (microseconds)
            scale_provider: Global scale source, polled for changes

        Raises:
            ConfigurationError: If custom_scale is not a finite real number
        """
        # Collaborators
        self.timer = timer or RealTimeTimer()
        self.scale_provider = scale_provider or default_scale_provider()

        # Accumulated state
        self._elapsed_us: float = 0.0
        self._running: bool = False

        # Advancement and scaling policy
        self._tracking_mode = TrackingMode(tracking_mode)
        self._scale_mode = ScaleMode(scale_mode)
        self._custom_scale: float = validate_scale(custom_scale, "Custom scale")
        if self._custom_scale < 0:
            logger.warning(
                f"Negative custom scale {self._custom_scale}: elapsed time runs backwards"
            )

        # Configuration applied at construction/reset
        self.autostart = autostart
        self.pause_on_reset = pause_on_reset

        # Reconciliation points
        self._last_sample_us: int = self.timer.get_time_us()
        self._observed_global_scale: float = self._read_global_scale()

        if autostart:
            self.start()

    def __enter__(self):
        """Context manager entry - starts the timer."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - pauses the timer, keeping elapsed time."""
        self.pause()

    # Run state
    def start(self) -> None:
        """
        Resume accumulation. No-op if already running.

        The sample point is moved to now so time spent paused is never counted.
        """
        if self._running:
            return

        self._last_sample_us = self.timer.get_time_us()
        self._observed_global_scale = self._read_global_scale()
        self._running = True
        logger.debug(f"Timer started at {self._elapsed_us:.0f}us")

    def pause(self) -> None:
        """Freeze accumulation after flushing pending time. No-op if paused."""
        if not self._running:
            return

        self._reconcile()
        self._running = False
        logger.debug(f"Timer paused at {self._elapsed_us:.0f}us")

    def reset(self) -> None:
        """
        Zero the elapsed time.

        Pauses the timer if pause_on_reset is enabled, otherwise leaves the run
        state alone. Scale and tracking configuration are unchanged.
        """
        self._elapsed_us = 0.0
        self._last_sample_us = self.timer.get_time_us()
        self._observed_global_scale = self._read_global_scale()
        if self.pause_on_reset:
            self._running = False
        logger.debug(f"Timer reset (running={self._running})")

    # Advancement
    def tick(self, delta_time: float) -> None:
        """
        Advance by one external step.

        Args:
            delta_time: Real duration of the step in seconds

        Must be called once per step in DELTA_ACCUMULATION mode. The global
        scale is polled here since the provider cannot notify changes. In
        TIMESTAMP_SAMPLING mode only the poll and a sample are performed.
        """
        self._poll_global_scale()

        if self._tracking_mode == TrackingMode.TIMESTAMP_SAMPLING:
            self.sample_now()
            return

        if not self._running:
            return

        self._advance(delta_time * US_PER_SECOND * self._effective_scale())

    def sample_now(self) -> None:
        """
        Fold clock time since the last sample into elapsed.

        Only acts in TIMESTAMP_SAMPLING mode while running.
        """
        if self._tracking_mode != TrackingMode.TIMESTAMP_SAMPLING:
            return

        now = self.timer.get_time_us()
        if not self._running:
            self._last_sample_us = now
            return

        time_change = now - self._last_sample_us
        if time_change > 0:
            self._advance(time_change * self._effective_scale())
            self._last_sample_us = now

    def _advance(self, scaled_delta_us: float) -> None:
        # Negative scales run time backwards but never below zero
        self._elapsed_us = max(0.0, self._elapsed_us + scaled_delta_us)

    def _reconcile(self) -> None:
        """Poll the global scale and flush pending sampled time."""
        self._poll_global_scale()
        self.sample_now()

    # Scaling
    def _read_global_scale(self) -> float:
        # NaN would also never compare equal to the cached value
        return validate_scale(self.scale_provider.get_global_scale(), "Global scale")

    def _poll_global_scale(self) -> None:
        current = self._read_global_scale()
        if current != self._observed_global_scale:
            self.on_global_scale_observed(current)

    def on_global_scale_observed(self, new_value: float) -> None:
        """
        Adopt a changed global scale.

        Time pending since the last sample is flushed under the previously
        observed value first, so the old multiplier only covers time that
        actually elapsed under it.
        """
        new_value = validate_scale(new_value, "Global scale")
        self.sample_now()
        logger.debug(
            f"Global scale changed {self._observed_global_scale} -> {new_value}"
        )
        self._observed_global_scale = float(new_value)

    def _effective_scale(self) -> float:
        scale = 1.0
        if self._scale_mode & ScaleMode.GLOBAL:
            scale *= self._observed_global_scale
        if self._scale_mode & ScaleMode.CUSTOM:
            scale *= self._custom_scale
        return scale

    def effective_scale(self) -> float:
        """
        Get the multiplier currently applied to real time.

        Product of the enabled factors, 1.0 if none is enabled.
        """
        self._reconcile()
        return self._effective_scale()

    def set_custom_scale(self, new_value: float) -> None:
        """
        Set the timer-local scale factor.

        Args:
            new_value: New custom multiplier

        Raises:
            ConfigurationError: If new_value is not a finite real number
        """
        new_value = validate_scale(new_value, "Custom scale")
        self._reconcile()
        if new_value < 0:
            logger.warning(
                f"Negative custom scale {new_value}: elapsed time runs backwards"
            )
        self._custom_scale = new_value

    def set_scale_mode(self, scale_mode: ScaleMode) -> None:
        """Enable or disable the global and custom scale factors."""
        self._reconcile()
        self._scale_mode = ScaleMode(scale_mode)

    def set_tracking_mode(self, tracking_mode: TrackingMode) -> None:
        """Switch the advancement strategy without losing or double-counting time."""
        tracking_mode = TrackingMode(tracking_mode)
        if tracking_mode == self._tracking_mode:
            return

        if self._tracking_mode == TrackingMode.TIMESTAMP_SAMPLING:
            self._reconcile()
        if tracking_mode == TrackingMode.TIMESTAMP_SAMPLING:
            # Time since the last step was never part of the sampling interval
            self._last_sample_us = self.timer.get_time_us()

        logger.debug(f"Tracking mode {self._tracking_mode.name} -> {tracking_mode.name}")
        self._tracking_mode = tracking_mode

    def set_elapsed_us(self, elapsed_us: float) -> None:
        """Overwrite the accumulated value; negative values are clamped to zero."""
        self._elapsed_us = max(0.0, float(elapsed_us))
        self._last_sample_us = self.timer.get_time_us()

    # Unit accessors
    def elapsed_microseconds(self) -> float:
        """Get reconciled elapsed time in microseconds."""
        self._reconcile()
        return self._elapsed_us

    def elapsed_milliseconds(self) -> float:
        """Get reconciled elapsed time in milliseconds."""
        return self.elapsed_microseconds() / US_PER_MS

    def elapsed_seconds(self) -> float:
        """Get reconciled elapsed time in seconds."""
        return self.elapsed_microseconds() / US_PER_SECOND

    def elapsed_minutes(self) -> float:
        """Get reconciled elapsed time in minutes."""
        return self.elapsed_microseconds() / US_PER_MINUTE

    def elapsed_hours(self) -> float:
        """Get reconciled elapsed time in hours."""
        return self.elapsed_microseconds() / US_PER_HOUR

    def elapsed_days(self) -> float:
        """Get reconciled elapsed time in days."""
        return self.elapsed_microseconds() / US_PER_DAY

    # Formatting
    def time_components(self) -> TimeComponents:
        """Get the hours/minutes/seconds/ms/us breakdown of elapsed time."""
        return TimeComponents.from_microseconds(self.elapsed_microseconds())

    def formatted_string(
        self, include_milliseconds: bool = True, delimiter: str = ":"
    ) -> str:
        """Get elapsed time as e.g. "01:02:05:000"."""
        return self.time_components().formatted_string(include_milliseconds, delimiter)

    # Query methods
    def is_running(self) -> bool:
        """Check if the timer is accumulating."""
        return self._running

    def get_tracking_mode(self) -> TrackingMode:
        """Get the active advancement strategy."""
        return self._tracking_mode

    def get_scale_mode(self) -> ScaleMode:
        """Get the enabled scale factors."""
        return self._scale_mode

    def get_custom_scale(self) -> float:
        """Get the timer-local scale factor."""
        return self._custom_scale

    def get_observed_global_scale(self) -> float:
        """Get the last global scale value seen by a poll."""
        return self._observed_global_scale

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"ElapsedTimer(elapsed={self._elapsed_us:.0f}us, "
            f"running={self._running}, mode={self._tracking_mode.name}, "
            f"scale={self._scale_mode!r})"
        )
