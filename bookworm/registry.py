"""Named collection of lexicon indices, built once at startup."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence

from bookworm.lexicon import LexiconIndex

logger = logging.getLogger(__name__)


class LoadError(Exception):
    """A dictionary's word list could not be loaded."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Could not load dictionary '{name}': {reason}")
        self.name = name
        self.reason = reason


def _validate_words(name: str, words: object) -> Sequence[str]:
    if isinstance(words, (str, bytes, Mapping)) or not isinstance(words, Sequence):
        raise LoadError(name, f"expected a list of words, got {type(words).__name__}")
    for pos, word in enumerate(words):
        if not isinstance(word, str):
            raise LoadError(name, f"entry {pos} is {type(word).__name__}, not a string")
    return words


class DictionaryRegistry:
    """Maps dictionary names to their indices, in load order.

    An index is only registered once it has been fully built, so a word list
    that fails to load never leaves a partially populated entry behind.
    """

    def __init__(self) -> None:
        self._indices: dict[str, LexiconIndex] = {}

    def load(self, name: str, words: object) -> LexiconIndex:
        words = _validate_words(name, words)
        index = LexiconIndex.from_words(words)
        self._indices[name] = index
        logger.info("Loaded dictionary %s (%d words)", name, index.word_count)
        return index

    def load_all(self, sources: Iterable[tuple[str, object]]) -> dict[str, LoadError]:
        """Load every ``(name, words)`` pair, collecting failures per dictionary."""
        errors: dict[str, LoadError] = {}
        for name, words in sources:
            try:
                self.load(name, words)
            except LoadError as e:
                logger.warning("%s", e)
                errors[name] = e
        return errors

    def get(self, name: str) -> LexiconIndex | None:
        return self._indices.get(name)

    def names(self) -> list[str]:
        return list(self._indices)

    def items(self) -> list[tuple[str, LexiconIndex]]:
        return list(self._indices.items())

    def __contains__(self, name: object) -> bool:
        return name in self._indices

    def __iter__(self) -> Iterator[str]:
        return iter(self._indices)

    def __len__(self) -> int:
        return len(self._indices)
