import pytest

from scaledtimer import ElapsedTimer, GlobalTimeScale, ScaleMode, SimulatedTimer, TrackingMode


@pytest.fixture
def clock() -> SimulatedTimer:
    return SimulatedTimer()


@pytest.fixture
def global_scale() -> GlobalTimeScale:
    return GlobalTimeScale(1.0)


@pytest.fixture
def delta_timer(clock, global_scale) -> ElapsedTimer:
    """Step-driven timer following the global scale, paused at zero."""
    return ElapsedTimer(
        tracking_mode=TrackingMode.DELTA_ACCUMULATION,
        scale_mode=ScaleMode.GLOBAL,
        timer=clock,
        scale_provider=global_scale,
    )


@pytest.fixture
def sampling_timer(clock, global_scale) -> ElapsedTimer:
    """Clock-sampled timer following the global scale, paused at zero."""
    return ElapsedTimer(
        tracking_mode=TrackingMode.TIMESTAMP_SAMPLING,
        scale_mode=ScaleMode.GLOBAL,
        timer=clock,
        scale_provider=global_scale,
    )
