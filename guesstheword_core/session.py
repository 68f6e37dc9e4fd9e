from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from .config import COUNTDOWN_TIME, DONE, ONE_SECOND, VOCABULARY
from .formatting import format_elapsed_time
from .observable import Observable, ReadOnlyObservable, derived
from .scheduling import Scheduler
from .timer import CountdownTimer, TimerCallbacks, TimerState
from .words import WordQueue, hint_text

_default_logger = logging.getLogger(__name__)


class SessionState(Enum):
    RUNNING = "running"
    FINISHED = "finished"
    ACKNOWLEDGED = "acknowledged"
    DISPOSED = "disposed"  # torn down before the countdown ran out


@dataclass(frozen=True)
class SessionSnapshot:
    """Every observable value of a session at one instant."""
    word: str
    hint: str
    score: int
    remaining_time: int
    time_display: str
    finished: bool
    state: SessionState


class GameSession:
    """All state for one play-through: word queue, score, countdown and the game-over event.

    Constructing a session deals the first word and starts the countdown on
    `scheduler` (the running asyncio loop when omitted). Presentation code
    subscribes to the read-only observables and drives play with skip() and
    correct(); when `finished` turns true it reacts and calls
    acknowledge_finish(). dispose() releases the timer.
    """

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
        logger: Optional[logging.Logger] = None,
        vocabulary: Iterable[str] = VOCABULARY,
    ) -> None:
        if scheduler is None:
            scheduler = asyncio.get_running_loop()
        self._log = logger or _default_logger
        self._rng = rng or random.Random()

        self._word: Observable[str] = Observable("")
        self._hint = derived(self._word, lambda w: hint_text(w, self._rng))
        self._score: Observable[int] = Observable(0)
        self._finished: Observable[bool] = Observable(False)
        self._remaining_time: Observable[int] = Observable(COUNTDOWN_TIME)
        self._time_display = derived(self._remaining_time, format_elapsed_time)
        self._acknowledged = False
        self._disposed = False

        self._log.info("GameSession created!")
        self._queue = WordQueue(vocabulary, self._rng)
        self._next_word()

        self._timer = CountdownTimer(
            COUNTDOWN_TIME,
            ONE_SECOND,
            TimerCallbacks(on_tick=self._on_tick, on_finish=self._on_finish),
            scheduler,
        )
        self._timer.start()

    # Observable surface

    @property
    def word(self) -> ReadOnlyObservable[str]:
        return self._word

    @property
    def hint(self) -> ReadOnlyObservable[str]:
        return self._hint

    @property
    def score(self) -> ReadOnlyObservable[int]:
        return self._score

    @property
    def remaining_time(self) -> ReadOnlyObservable[int]:
        return self._remaining_time

    @property
    def time_display(self) -> ReadOnlyObservable[str]:
        return self._time_display

    @property
    def finished(self) -> ReadOnlyObservable[bool]:
        return self._finished

    @property
    def state(self) -> SessionState:
        if self._acknowledged:
            return SessionState.ACKNOWLEDGED
        if self._timer.state is TimerState.FINISHED:
            return SessionState.FINISHED
        if self._disposed:
            return SessionState.DISPOSED
        return SessionState.RUNNING

    @property
    def words_left(self) -> int:
        return len(self._queue)

    @property
    def refills(self) -> int:
        return self._queue.refills

    @property
    def disposed(self) -> bool:
        return self._disposed

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            word=self._word.value,
            hint=self._hint.value,
            score=self._score.value,
            remaining_time=self._remaining_time.value,
            time_display=self._time_display.value,
            finished=self._finished.value,
            state=self.state,
        )

    # Player actions

    def skip(self) -> None:
        self._score.set(self._score.value - 1)
        self._next_word()

    def correct(self) -> None:
        self._score.set(self._score.value + 1)
        self._next_word()

    def acknowledge_finish(self) -> None:
        """Clear the game-over event once the caller has reacted to it."""
        if not self._finished.value:
            return
        self._acknowledged = True
        self._finished.set(False)

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self._timer.cancel()
        self._log.info("GameSession destroyed!")

    def __enter__(self) -> "GameSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    # Internals

    def _next_word(self) -> None:
        self._word.set(self._queue.next_word())

    def _on_tick(self, remaining: int) -> None:
        self._remaining_time.set(remaining)

    def _on_finish(self) -> None:
        self._remaining_time.set(DONE)
        self._finished.set(True)

    def __repr__(self) -> str:
        return (
            f"GameSession(word={self._word.value!r}, score={self._score.value}, "
            f"remaining={self._remaining_time.value}, state={self.state.value})"
        )
