"""Fixed game rules and host-side settings for Guess The Word."""

from __future__ import annotations

import os
from typing import Optional, Tuple

# Words dealt into the queue; every refill reshuffles this exact list.
VOCABULARY: Tuple[str, ...] = (
    "queen",
    "hospital",
    "basketball",
    "cat",
    "change",
    "snail",
    "soup",
    "calendar",
    "sad",
    "desk",
    "guitar",
    "home",
    "railway",
    "zebra",
    "jelly",
    "car",
    "crow",
    "trade",
    "bag",
    "roll",
    "bubble",
)

# Time when the game is over (seconds)
DONE = 0

# Countdown tick interval (seconds)
ONE_SECOND = 1

# Total time for the game (seconds)
COUNTDOWN_TIME = 60

# Logging (host-side only; rules above are not configurable)
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
LOG_LEVEL: str = os.getenv("GUESSTHEWORD_LOG_LEVEL", "INFO")
LOG_FILE: Optional[str] = os.getenv("GUESSTHEWORD_LOG_FILE") or None
LOG_MAX_BYTES = 5_000_000
LOG_BACKUP_COUNT = 3
