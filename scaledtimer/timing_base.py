from typing import Protocol, runtime_checkable

@runtime_checkable
class TimerBase(Protocol):
    def get_time_us(self) -> int:
        """Get current monotonic time in microseconds"""
        ...


@runtime_checkable
class ScaleProviderBase(Protocol):
    def get_global_scale(self) -> float:
        """Get the current global time scale (poll only, no notifications)"""
        ...
