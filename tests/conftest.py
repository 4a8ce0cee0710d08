import pytest

from checkout_core.interpolation import ManualClock, ManualFrameScheduler


@pytest.fixture
def scheduler():
    return ManualFrameScheduler()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def drive(scheduler, clock):
    """Advance the clock by `step` ms and tick, until nothing is pending."""

    def _drive(step=100.0, max_frames=1000):
        frames = 0
        while scheduler.pending and frames < max_frames:
            clock.advance(step)
            scheduler.tick()
            frames += 1
        return frames

    return _drive
