"""Trie-backed word index with rack-constrained word finding."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from bookworm.constants import MIN_WORD_LENGTH


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class LexiconIndex:
    """Prefix tree holding one word list."""

    def __init__(self) -> None:
        self.root = TrieNode()
        self._word_count = 0

    @classmethod
    def from_words(cls, words: Iterable[str]) -> LexiconIndex:
        index = cls()
        for word in words:
            index.insert(word)
        return index

    def insert(self, word: str) -> None:
        """Add *word* (lowercased). Blank strings are ignored."""
        word = word.strip().lower()
        if not word:
            return
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_word:
            node.is_word = True
            self._word_count += 1

    def _walk(self, chars: str) -> TrieNode | None:
        node = self.root
        for ch in chars.lower():
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def is_valid_word(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_word

    def has_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def search(self, rack: str, min_length: int = MIN_WORD_LENGTH) -> set[str]:
        """Find all words that can be spelled from the letters in *rack*.

        Each rack letter may be used once per occurrence. The walk only
        follows children the trie actually has, so impossible prefixes are
        pruned as soon as they appear.
        """
        found: set[str] = set()
        remaining = Counter(rack.lower())
        if not remaining:
            return found

        def _search(node: TrieNode, path: list[str]) -> None:
            if node.is_word and len(path) >= min_length:
                found.add("".join(path))
            for ch in list(remaining):
                if remaining[ch] <= 0:
                    continue
                child = node.children.get(ch)
                if child is None:
                    continue
                remaining[ch] -= 1
                path.append(ch)
                _search(child, path)
                path.pop()
                remaining[ch] += 1

        _search(self.root, [])
        return found

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_valid_word(word)

    def __len__(self) -> int:
        return self._word_count

    @property
    def word_count(self) -> int:
        return self._word_count
