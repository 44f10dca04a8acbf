"""Rack search: find words in every dictionary, score them, keep the best."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from bookworm.constants import (
    LETTER_STRENGTH,
    MAX_RESULTS,
    MIN_WORD_LENGTH,
    QU_DIGRAPH,
    QU_STRENGTH,
)
from bookworm.registry import DictionaryRegistry


@dataclass(frozen=True)
class ScoredWord:
    word: str
    strength: float

    def sort_key(self) -> tuple[float, str]:
        return (-self.strength, self.word)

    def __lt__(self, other: ScoredWord) -> bool:
        return self.sort_key() < other.sort_key()


def word_strength(word: str) -> float:
    """Sum of letter weights, with "qu" counted once as a single tile.

    Characters missing from the weight table contribute nothing.
    """
    strength = 0.0
    i = 0
    while i < len(word):
        if word[i:i + 2].lower() == QU_DIGRAPH:
            strength += QU_STRENGTH
            i += 2
        else:
            strength += LETTER_STRENGTH.get(word[i].lower(), 0)
            i += 1
    return strength


def rank_words(words: Iterable[str], limit: int = MAX_RESULTS) -> list[ScoredWord]:
    """Score every word, sort strongest first (ties alphabetical), keep *limit*."""
    scored = [ScoredWord(w, word_strength(w)) for w in words]
    scored.sort(key=ScoredWord.sort_key)
    return scored[:limit]


class RackSolver:
    """Runs a rack against every dictionary in a registry."""

    def __init__(self, registry: DictionaryRegistry,
                 min_length: int = MIN_WORD_LENGTH,
                 limit: int = MAX_RESULTS) -> None:
        self.registry = registry
        self.min_length = min_length
        self.limit = limit

    def find_solutions(self, letters: str) -> dict[str, list[ScoredWord]]:
        """Return the top-ranked words per dictionary.

        Every registered dictionary appears in the result, with an empty
        list when nothing matches (including for an empty rack).
        """
        results: dict[str, list[ScoredWord]] = {}
        for name, index in self.registry.items():
            matches = index.search(letters, min_length=self.min_length)
            results[name] = rank_words(matches, limit=self.limit)
        return results
