"""
Time-bounded interpolation of displayed numeric values.

Ticks come from an injected frame scheduler (one callback per display
refresh) and elapsed time from an injected clock, both in milliseconds, so
runs can be driven deterministically without real time passing.
"""

from __future__ import annotations

import logging
import math
import time
from enum import Enum, auto
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Protocol, Tuple

from .data_models import check_number

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
SampleCallback = Callable[[float], None]


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


def round_to_cents(value: float) -> float:
    """Round half up to two decimal places."""

    return math.floor(value * 100 + 0.5) / 100


def sample_at(
    start_value: float, end_value: float, duration_ms: float, elapsed: float
) -> Tuple[float, bool]:
    """
    Return `(value, finished)` for a run that has been going for `elapsed`
    milliseconds. Once finished the value is exactly `end_value`.
    """

    if elapsed >= duration_ms or duration_ms == 0:
        return end_value, True
    # unreadable or pre-start clock readings count as no progress
    if math.isnan(elapsed) or elapsed < 0:
        elapsed = 0.0
    progress = elapsed / duration_ms
    return round_to_cents(start_value + (end_value - start_value) * progress), False


def interpolation_samples(
    start_value: float,
    end_value: float,
    duration_ms: float,
    elapsed_times: Iterable[float],
) -> Iterator[float]:
    """
    Lazily yield one sample per elapsed time until the run finishes.

    The sequence ends right after yielding `end_value`, even if more
    elapsed times are available.
    """

    start_value, end_value, duration_ms = _check_run_args(
        start_value, end_value, duration_ms
    )
    return _samples(start_value, end_value, duration_ms, elapsed_times)


def _samples(
    start_value: float,
    end_value: float,
    duration_ms: float,
    elapsed_times: Iterable[float],
) -> Iterator[float]:
    for elapsed in elapsed_times:
        value, finished = sample_at(start_value, end_value, duration_ms, elapsed)
        yield value
        if finished:
            return


def _check_run_args(
    start_value: float, end_value: float, duration_ms: float
) -> Tuple[float, float, float]:
    return (
        check_number("start_value", start_value),
        check_number("end_value", end_value),
        check_number("duration_ms", duration_ms, minimum=0.0),
    )


class FrameScheduler(Protocol):
    """Source of per-frame callbacks, e.g. a display refresh signal."""

    def request_frame(self, callback: Callable[[], None]) -> int:
        ...

    def cancel_frame(self, handle: int) -> None:
        ...


class ManualFrameScheduler:
    """
    Frame scheduler driven explicitly by calling `tick()`.

    Callbacks requested while a frame is running are deferred to the next
    tick.
    """

    def __init__(self) -> None:
        self._next_handle = 1
        self._pending: Dict[int, Callable[[], None]] = {}

    def request_frame(self, callback: Callable[[], None]) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._pending.pop(handle, None)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def tick(self) -> int:
        """
        Run every callback queued before this tick; return how many ran.

        A callback that raises does not stop the rest of the batch; the
        first error is re-raised once every due callback has run.
        """

        ran = 0
        errors: List[Exception] = []
        for handle in list(self._pending):
            callback = self._pending.pop(handle, None)
            if callback is None:
                # cancelled by an earlier callback in this tick
                continue
            ran += 1
            try:
                callback()
            except Exception as exc:
                errors.append(exc)
        for exc in errors[1:]:
            logger.error(f"Frame callback failed: {exc!r}")
        if errors:
            raise errors[0]
        return ran


class ManualClock:
    """Clock whose time only moves when told to."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> float:
        self.now += ms
        return self.now


class RunState(Enum):
    RUNNING = auto()
    COMPLETED = auto()
    SUPERSEDED = auto()
    CANCELLED = auto()


class InterpolationRun:
    """
    One timed transition of a displayed number from a start to an end value.

    Emits through `on_sample` on each scheduled frame. COMPLETED, SUPERSEDED
    and CANCELLED are terminal: no emission happens after reaching them and
    no frame stays scheduled.
    """

    def __init__(
        self,
        start_value: float,
        end_value: float,
        duration_ms: float,
        scheduler: FrameScheduler,
        clock: Clock = monotonic_ms,
        on_sample: Optional[SampleCallback] = None,
    ) -> None:
        self.start_value, self.end_value, self.duration_ms = _check_run_args(
            start_value, end_value, duration_ms
        )
        self._scheduler = scheduler
        self._clock = clock
        self._on_sample = on_sample
        self.state = RunState.RUNNING
        self.last_value: Optional[float] = None
        self.start_timestamp = clock()
        self._handle: Optional[int] = scheduler.request_frame(self._on_frame)

    @property
    def active(self) -> bool:
        return self.state is RunState.RUNNING

    def _on_frame(self) -> None:
        self._handle = None
        if self.state is not RunState.RUNNING:
            return
        elapsed = self._clock() - self.start_timestamp
        value, finished = sample_at(
            self.start_value, self.end_value, self.duration_ms, elapsed
        )
        if finished:
            self.state = RunState.COMPLETED
        else:
            self._handle = self._scheduler.request_frame(self._on_frame)
        self.last_value = value
        if self._on_sample is not None:
            self._on_sample(value)

    def _stop(self, state: RunState) -> None:
        if self.state is not RunState.RUNNING:
            return
        self.state = state
        if self._handle is not None:
            self._scheduler.cancel_frame(self._handle)
            self._handle = None

    def cancel(self) -> None:
        self._stop(RunState.CANCELLED)

    def supersede(self) -> None:
        self._stop(RunState.SUPERSEDED)


def start_interpolation(
    start_value: float,
    end_value: float,
    duration_ms: float,
    scheduler: FrameScheduler,
    clock: Clock = monotonic_ms,
    on_sample: Optional[SampleCallback] = None,
) -> InterpolationRun:
    return InterpolationRun(
        start_value, end_value, duration_ms, scheduler, clock, on_sample
    )


class AnimatedValue:
    """
    A displayed number that animates towards each new target.

    At most one run is active at a time: `animate_to` supersedes the
    current run and starts the next one from the value on display.
    """

    def __init__(
        self,
        scheduler: FrameScheduler,
        clock: Clock = monotonic_ms,
        initial: float = 0.0,
        duration_ms: float = 1000.0,
        on_change: Optional[SampleCallback] = None,
    ) -> None:
        self._scheduler = scheduler
        self._clock = clock
        self.value = check_number("initial", initial)
        self.duration_ms = check_number("duration_ms", duration_ms, minimum=0.0)
        self._on_change = on_change
        self.run: Optional[InterpolationRun] = None

    def _receive(self, value: float) -> None:
        self.value = value
        if self._on_change is not None:
            self._on_change(value)

    def animate_to(
        self, end_value: float, duration_ms: Optional[float] = None
    ) -> InterpolationRun:
        if duration_ms is None:
            duration_ms = self.duration_ms
        # validate before touching the running animation
        _check_run_args(self.value, end_value, duration_ms)
        if self.run is not None and self.run.active:
            logger.debug(f"Superseding run towards {self.run.end_value}")
            self.run.supersede()
        self.run = InterpolationRun(
            self.value,
            end_value,
            duration_ms,
            self._scheduler,
            self._clock,
            self._receive,
        )
        return self.run

    def cancel(self) -> None:
        if self.run is not None:
            self.run.cancel()
