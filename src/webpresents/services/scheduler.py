"""One-shot timer scheduling for slide behaviours and transitions."""

from __future__ import annotations

import heapq
import itertools
import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Tuple

logger = logging.getLogger("services.scheduler")


class TimerHandle(ABC):
    """Handle returned by :meth:`Scheduler.schedule_once`."""

    @property
    @abstractmethod
    def active(self) -> bool:
        """True until the timer fires or is cancelled."""

    @abstractmethod
    def cancel(self) -> None:
        """Prevent the callback from running. Safe to call more than once."""


class Scheduler(ABC):
    """Runs callbacks later on the presentation's single event loop."""

    @abstractmethod
    def schedule_once(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        """Run ``callback`` once after ``delay_ms`` milliseconds."""

    @abstractmethod
    def shutdown(self) -> None:
        """Cancel every pending timer."""


class _ManualTimer(TimerHandle):
    def __init__(self, due_ms: float, callback: Callable[[], None]) -> None:
        self.due_ms = due_ms
        self.callback = callback
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self._active = False

    def _consume(self) -> None:
        self._active = False


class ManualScheduler(Scheduler):
    """Virtual-clock scheduler for headless rehearsals and tests.

    Nothing runs until the clock is advanced. Timers due at the same instant run
    in the order they were scheduled, and timers scheduled by a callback run in
    the same ``advance`` call when they fall due before its target time.
    """

    def __init__(self) -> None:
        self._now_ms: float = 0
        self._counter = itertools.count()
        self._queue: List[Tuple[float, int, _ManualTimer]] = []

    @property
    def now_ms(self) -> float:
        return self._now_ms

    @property
    def pending(self) -> int:
        return sum(1 for _, _, timer in self._queue if timer.active)

    def next_due_ms(self) -> float | None:
        self._drop_cancelled()
        return self._queue[0][0] if self._queue else None

    def schedule_once(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative, got {delay_ms}")
        timer = _ManualTimer(self._now_ms + delay_ms, callback)
        heapq.heappush(self._queue, (timer.due_ms, next(self._counter), timer))
        logger.debug("Timer scheduled for t=%.0fms", timer.due_ms)
        return timer

    def advance(self, delay_ms: float) -> int:
        """Move the clock forward, running every timer that falls due. Returns the count run."""
        target = self._now_ms + delay_ms
        fired = 0
        while True:
            due = self.next_due_ms()
            if due is None or due > target:
                break
            fired += self._run_head()
        self._now_ms = target
        return fired

    def run_next(self) -> bool:
        """Jump to the next pending timer and run it. Returns False when idle."""
        if self.next_due_ms() is None:
            return False
        self._run_head()
        return True

    def shutdown(self) -> None:
        for _, _, timer in self._queue:
            timer.cancel()
        self._queue.clear()

    def _run_head(self) -> int:
        due, _, timer = heapq.heappop(self._queue)
        self._now_ms = max(self._now_ms, due)
        if not timer.active:
            return 0
        timer._consume()
        timer.callback()
        return 1

    def _drop_cancelled(self) -> None:
        while self._queue and not self._queue[0][2].active:
            heapq.heappop(self._queue)
