"""
Wall-clock time implementation using system monotonic clocks
"""
import time
from .timing_base import TimerBase

class RealTimeTimer(TimerBase):
    def __init__(self):
        self._timer_func = self._select_timer()
        self._timer_name = self._timer_func.__name__
        self._is_nanosecond = 'ns' in self._timer_name

    def _select_timer(self):
        # Only monotonic sources; wall time may step backwards
        if hasattr(time, 'monotonic_ns'):
            try:
                time.monotonic_ns()
                return time.monotonic_ns
            except OSError:
                pass
        if hasattr(time, 'perf_counter_ns'):
            try:
                time.perf_counter_ns()
                return time.perf_counter_ns
            except OSError:
                pass
        return time.monotonic

    def get_time_us(self) -> int:
        if self._is_nanosecond:
            return self._timer_func() // 1000
        return int(self._timer_func() * 1_000_000)

    @property
    def timer_name(self) -> str:
        return self._timer_name

    def __str__(self):
        return f"RealTimeTimer({self._timer_name})"
