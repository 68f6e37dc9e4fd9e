from __future__ import annotations

import random

# Facade module that re-exports the Guess The Word core.
# Single-responsibility modules live under guesstheword_core/*.

from guesstheword_core.config import (
    COUNTDOWN_TIME,
    DONE,
    ONE_SECOND,
    VOCABULARY,
)
from guesstheword_core.formatting import format_elapsed_time
from guesstheword_core.log import configure_logging
from guesstheword_core.observable import (
    DerivedObservable,
    Observable,
    ReadOnlyObservable,
    derived,
)
from guesstheword_core.scheduling import ManualHandle, ManualScheduler, Scheduler
from guesstheword_core.session import GameSession, SessionSnapshot, SessionState
from guesstheword_core.timer import CountdownTimer, TimerCallbacks, TimerState
from guesstheword_core.words import Hint, WordQueue, hint_text, make_hint


def new_game(scheduler: Scheduler | None = None, seed: int | None = None) -> GameSession:
    """Start a fresh session; a seed makes the deal and the hints reproducible."""
    rng = random.Random(seed) if seed is not None else None
    return GameSession(scheduler=scheduler, rng=rng)
