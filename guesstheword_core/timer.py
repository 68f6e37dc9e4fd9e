from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .config import DONE
from .scheduling import Handle, Scheduler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimerCallbacks:
    """What a countdown does on each tick (with seconds remaining) and when it runs out."""
    on_tick: Callable[[int], None]
    on_finish: Callable[[], None]


class TimerState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"
    CANCELLED = "cancelled"


class CountdownTimer:
    """One-shot countdown that ticks every `interval` seconds until `total` has elapsed.

    Remaining time is derived from the number of delivered ticks, so it never
    drifts from the tick count. The final tick reports through on_finish only.
    """

    def __init__(self, total: int, interval: int, callbacks: TimerCallbacks, scheduler: Scheduler) -> None:
        if interval <= 0:
            raise ValueError(f'Tick interval must be positive, got {interval}')
        if total <= 0:
            raise ValueError(f'Countdown duration must be positive, got {total}')
        self.total = total
        self.interval = interval
        self._callbacks = callbacks
        self._scheduler = scheduler
        self._handle: Optional[Handle] = None
        self._ticks = 0
        self._tick_limit = math.ceil(total / interval)
        self.state = TimerState.IDLE

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def remaining(self) -> int:
        return max(DONE, int(self.total - self._ticks * self.interval))

    @property
    def running(self) -> bool:
        return self.state is TimerState.RUNNING

    def start(self) -> None:
        if self.state is not TimerState.IDLE:
            raise RuntimeError(f'Countdown already started (state={self.state.value})')
        self.state = TimerState.RUNNING
        logger.debug("countdown started: total=%ss interval=%ss", self.total, self.interval)
        self._schedule()

    def cancel(self) -> None:
        """Stop the countdown. Safe to call any number of times, in any state."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        if self.state in (TimerState.IDLE, TimerState.RUNNING):
            logger.debug("countdown cancelled with %ss remaining", self.remaining)
            self.state = TimerState.CANCELLED

    def _schedule(self) -> None:
        self._handle = self._scheduler.call_later(self.interval, self._fire)

    def _fire(self) -> None:
        # A tick already queued by the host can still arrive after cancel().
        if self.state is not TimerState.RUNNING:
            return
        self._handle = None
        self._ticks += 1
        if self._ticks >= self._tick_limit:
            self.state = TimerState.FINISHED
            logger.debug("countdown finished after %d ticks", self._ticks)
            self._callbacks.on_finish()
            return
        # Reschedule first so a callback that cancels also cancels the next tick.
        self._schedule()
        self._callbacks.on_tick(self.remaining)
