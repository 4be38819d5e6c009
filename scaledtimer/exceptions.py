"""
Exceptions raised by scaledtimer.
"""


class ScaledTimerError(Exception):
    """Root of every error raised by timers, clocks and scale providers."""
    pass


class ConfigurationError(ScaledTimerError):
    """A scale factor, tracking mode or YAML timer setting is not usable."""
    pass
