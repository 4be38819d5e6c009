"""
Process-wide time scale shared by every timer that opts into it.

Mirrors the engine-style global time scale: any code may change the value at
any moment and nothing is notified. Timers poll it on every step and read
and reconcile on their own. A default instance is created once at module
import; the convenience functions below operate on it.
"""

import math

from loguru import logger

from .exceptions import ConfigurationError
from .timing_base import ScaleProviderBase


def validate_scale(scale, name: str = "Scale") -> float:
    """
    Check that a scale factor is a finite real number.

    Returns:
        The scale as a float

    Raises:
        ConfigurationError: If scale is non-numeric, NaN or infinite
    """
    if isinstance(scale, bool) or not isinstance(scale, (int, float)):
        raise ConfigurationError(f"{name} must be a number, got {scale!r}")
    if not math.isfinite(scale):
        raise ConfigurationError(f"{name} must be finite, got {scale!r}")
    return float(scale)


class GlobalTimeScale(ScaleProviderBase):
    """
    Mutable global time scale with no change notification.

    1.0 is real time, 0.0 freezes scaled time, values above 1.0 fast-forward.
    Negative values are accepted and run scaled time backwards.
    """

    def __init__(self, scale: float = 1.0):
        self._scale: float = 1.0
        self.set_global_scale(scale)

    def get_global_scale(self) -> float:
        """Get the current global scale."""
        return self._scale

    def set_global_scale(self, scale: float) -> None:
        """
        Set the global scale.

        Args:
            scale: New multiplier applied to real time

        Raises:
            ConfigurationError: If scale is not a finite real number
        """
        scale = validate_scale(scale, "Global scale")
        if scale < 0:
            logger.warning(f"Negative global time scale {scale}: scaled time runs backwards")
        self._scale = scale

    def __repr__(self) -> str:
        return f"GlobalTimeScale({self._scale})"


# Global scale instance - initialized once at module import
_global_scale = GlobalTimeScale()


def default_scale_provider() -> GlobalTimeScale:
    """Get the process-wide scale provider."""
    return _global_scale


def get_global_scale() -> float:
    """Get the process-wide time scale."""
    return _global_scale.get_global_scale()


def set_global_scale(scale: float) -> None:
    """Set the process-wide time scale."""
    _global_scale.set_global_scale(scale)
