from __future__ import annotations

import heapq
import itertools
from typing import Callable, List, Protocol, Tuple


class Handle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything with asyncio's call_later shape; a running event loop qualifies."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> Handle: ...


class ManualHandle:
    def __init__(self, when: float, callback: Callable[[], None]) -> None:
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Virtual-clock scheduler. Nothing runs until advance() moves time forward.

    Callbacks fire one at a time in due order; equal due times fire in the
    order they were scheduled. A callback may schedule further callbacks, which
    run in the same advance() if they fall due within it.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)
        self._queue: List[Tuple[float, int, ManualHandle]] = []
        self._seq = itertools.count()

    def time(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualHandle:
        if delay < 0:
            delay = 0
        handle = ManualHandle(self._now + delay, callback)
        heapq.heappush(self._queue, (handle.when, next(self._seq), handle))
        return handle

    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if not h.cancelled)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, running every callback that falls due. Returns how many ran."""
        if seconds < 0:
            raise ValueError('Cannot move the clock backwards')
        deadline = self._now + seconds
        ran = 0
        while self._queue and self._queue[0][0] <= deadline:
            when, _, handle = heapq.heappop(self._queue)
            self._now = when
            if handle.cancelled:
                continue
            handle.callback()
            ran += 1
        self._now = deadline
        return ran

    def run_all(self) -> int:
        """Run until nothing is pending, regardless of how far the clock has to move."""
        ran = 0
        while self._queue:
            when, _, handle = heapq.heappop(self._queue)
            self._now = max(self._now, when)
            if handle.cancelled:
                continue
            handle.callback()
            ran += 1
        return ran
