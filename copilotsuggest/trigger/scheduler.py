"""
Timer scheduling for the trigger controller and AI fetcher.

Both components only need "call this in N ms, unless cancelled". The
``Scheduler`` protocol captures that so tests can drive virtual time with
``ManualScheduler`` instead of sleeping.
"""

from __future__ import annotations

import heapq
import itertools
import threading
import time
from typing import Callable, Optional, Protocol

Callback = Callable[[], None]


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def now_ms(self) -> float: ...

    def call_later(self, delay_ms: float, callback: Callback) -> TimerHandle: ...


class _ManualTimer:
    def __init__(self, due_ms: float, callback: Callback) -> None:
        self.due_ms = due_ms
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Virtual-time scheduler. Timers fire only inside ``advance``."""

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now = start_ms
        self._seq = itertools.count()
        self._queue: list[tuple[float, int, _ManualTimer]] = []

    def now_ms(self) -> float:
        return self._now

    def call_later(self, delay_ms: float, callback: Callback) -> _ManualTimer:
        timer = _ManualTimer(self._now + max(0.0, delay_ms), callback)
        heapq.heappush(self._queue, (timer.due_ms, next(self._seq), timer))
        return timer

    def advance(self, ms: float) -> int:
        """Move time forward by *ms*, firing due timers in order. Returns the count fired."""
        target = self._now + ms
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, timer = heapq.heappop(self._queue)
            self._now = due
            if timer.cancelled:
                continue
            timer.callback()
            fired += 1
        self._now = target
        return fired

    @property
    def pending(self) -> int:
        """Timers scheduled and not cancelled."""
        return sum(1 for _, _, t in self._queue if not t.cancelled)


class ThreadingScheduler:
    """
    Wall-clock scheduler backed by ``threading.Timer``.

    Callbacks run on the timer's own thread. ``TriggerController`` and
    ``AISuggestionFetcher`` lock their state for this; other callers must
    do the same or hand callbacks back to their own thread.
    """

    def now_ms(self) -> float:
        return time.monotonic() * 1000.0

    def call_later(self, delay_ms: float, callback: Callback) -> threading.Timer:
        timer = threading.Timer(max(0.0, delay_ms) / 1000.0, callback)
        timer.daemon = True
        timer.start()
        return timer


def cancel(handle: Optional[TimerHandle]) -> None:
    if handle is not None:
        handle.cancel()
