"""
Manual step clock implementation for simulation and tests
"""

from .timing_base import TimerBase


class SimulatedTimer(TimerBase):
    def __init__(self, start_us: int = 0):
        self._current_time_us = int(start_us)

    def step(self, delta_us: int):
        """Manually advance time by delta in microseconds"""
        if delta_us < 0:
            raise ValueError("Monotonic clock cannot step backwards")
        self._current_time_us += int(delta_us)

    def step_s(self, delta_s: float):
        """Manually advance time by delta in seconds"""
        self.step(round(delta_s * 1_000_000))

    def reset(self):
        """Reset clock to zero"""
        self._current_time_us = 0

    def get_time_us(self) -> int:
        return self._current_time_us

    def __str__(self):
        return f"SimulatedTimer({self._current_time_us}us)"
