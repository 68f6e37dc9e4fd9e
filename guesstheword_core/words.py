from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .config import VOCABULARY


class WordQueue:
    """Shuffled queue over a fixed vocabulary that refills itself when exhausted."""

    def __init__(self, vocabulary: Iterable[str] = VOCABULARY, rng: Optional[random.Random] = None) -> None:
        self._vocabulary: Tuple[str, ...] = tuple(vocabulary)
        if not self._vocabulary:
            raise ValueError('Vocabulary must contain at least one word')
        if any(not w for w in self._vocabulary):
            raise ValueError('Vocabulary words must be non-empty')
        self._rng = rng or random.Random()
        self._words: List[str] = []
        self.refills = 0
        self.reset()

    @property
    def vocabulary(self) -> Tuple[str, ...]:
        return self._vocabulary

    def reset(self) -> None:
        """Reload the full vocabulary and randomize its order."""
        self._words = list(self._vocabulary)
        self._rng.shuffle(self._words)

    def next_word(self) -> str:
        """Pop the front word, reshuffling the vocabulary first if the queue ran dry."""
        if not self._words:
            self.reset()
            self.refills += 1
        return self._words.pop(0)

    def peek(self) -> Tuple[str, ...]:
        return tuple(self._words)

    def __len__(self) -> int:
        return len(self._words)


@dataclass(frozen=True)
class Hint:
    word: str
    position: int  # 1-based
    letter: str  # uppercased

    @property
    def length(self) -> int:
        return len(self.word)

    def text(self) -> str:
        return (
            f"Current word has {self.length} letters"
            f"\nThe letter at position {self.position} is {self.letter}"
        )


def make_hint(word: str, rng: Optional[random.Random] = None) -> Hint:
    """Reveal one uniformly chosen letter of word."""
    if not word:
        raise ValueError('Cannot build a hint for an empty word')
    r = rng or random
    position = r.randint(1, len(word))
    return Hint(word=word, position=position, letter=word[position - 1].upper())


def hint_text(word: str, rng: Optional[random.Random] = None) -> str:
    """Hint sentence for word; the empty word (before the first deal) has no hint."""
    if not word:
        return ""
    return make_hint(word, rng).text()
