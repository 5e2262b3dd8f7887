"""One-shot and repeating timers, measured in seconds or in frames."""

from __future__ import annotations

import heapq
import itertools
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field

from lawnwar.frame import FrameManager

MAX_TIMERS = 1000

TimerCallback = Callable[[], None]

_timer_ids = itertools.count(1)


class TimerLimitError(RuntimeError):
    """Raised when a queue already holds too many timers."""


@dataclass(order=True)
class Timer:
    """A scheduled callback; timers compare by their due time."""

    timeout: float
    callback: TimerCallback = field(compare=False)
    interval: float = field(default=0, compare=False)
    id: int = field(default_factory=lambda: next(_timer_ids), compare=False)

    def reschedule(self, now: float) -> None:
        """Make the timer due one interval after ``now``."""
        self.timeout = now + self.interval


class _TimerQueueBase(ABC):
    def __init__(self) -> None:
        self._heap: list[tuple[float, int, Timer]] = []
        self._ids: set[int] = set()
        self._order = itertools.count()

    @abstractmethod
    def _now(self) -> float:
        """Return the current time in the queue's unit."""

    def __len__(self) -> int:
        return len(self._ids)

    def _push(self, timer: Timer) -> None:
        heapq.heappush(self._heap, (timer.timeout, next(self._order), timer))

    def _add_timer(
        self, timeout: float, callback: TimerCallback, interval: float
    ) -> int | None:
        if len(self._ids) > MAX_TIMERS:
            raise TimerLimitError(f"more than {MAX_TIMERS} timers scheduled")
        if timeout <= 0:
            callback()
            if interval > 0:
                return self._add_timer(interval, callback, interval)
            return None
        timer = Timer(self._now() + timeout, callback, interval)
        self._push(timer)
        self._ids.add(timer.id)
        return timer.id

    def _del_timer(self, timer_id: int) -> None:
        self._ids.discard(timer_id)

    def _update(self) -> None:
        if not self._heap:
            return
        now = self._now()
        while self._heap:
            timeout, _, timer = self._heap[0]
            if timer.id not in self._ids:
                heapq.heappop(self._heap)
                continue
            if timeout > now:
                return
            heapq.heappop(self._heap)
            timer.callback()
            if timer.interval > 0:
                timer.reschedule(now)
                self._push(timer)
            else:
                self._ids.discard(timer.id)

    def _reset(self) -> None:
        self._ids.clear()
        self._heap.clear()


class TimerQueue(_TimerQueueBase):
    """Timers measured in seconds on a wall or monotonic clock."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        super().__init__()
        self._clock = clock

    def _now(self) -> float:
        return self._clock()

    def add_timer(
        self, timeout: float, callback: TimerCallback, interval: float = 0
    ) -> int | None:
        """Schedule ``callback`` after ``timeout`` seconds, repeating every ``interval`` if positive.

        A non-positive timeout runs the callback at once; the id of the timer left
        scheduled is returned, or None if nothing stays scheduled.
        """
        return self._add_timer(timeout, callback, interval)

    def del_timer(self, timer_id: int) -> None:
        """Cancel a timer; unknown ids are ignored."""
        self._del_timer(timer_id)

    def update(self) -> None:
        """Run every timer that is due."""
        self._update()

    def reset(self) -> None:
        """Drop every timer."""
        self._reset()


class FrameTimerQueue(_TimerQueueBase):
    """Timers measured in rendered frames."""

    _shared: FrameTimerQueue | None = None

    def __init__(self, frames: FrameManager | None = None) -> None:
        super().__init__()
        self._frames = frames

    def _now(self) -> float:
        frames = self._frames if self._frames is not None else FrameManager.instance()
        return frames.frame

    def add_timer(
        self, timeout: int, callback: TimerCallback, interval: int = 0
    ) -> int | None:
        """Schedule ``callback`` after ``timeout`` frames, repeating every ``interval`` if positive."""
        if timeout < 0 or interval < 0:
            raise ValueError("frame counts cannot be negative")
        return self._add_timer(timeout, callback, interval)

    def del_timer(self, timer_id: int) -> None:
        """Cancel a timer; unknown ids are ignored."""
        self._del_timer(timer_id)

    def update(self) -> None:
        """Run every timer that is due."""
        self._update()

    def reset(self) -> None:
        """Drop every timer."""
        self._reset()

    @classmethod
    def instance(cls) -> FrameTimerQueue:
        """Return the process-wide frame timer queue."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared