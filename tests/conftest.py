"""Shared fixtures for Bookworm tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from bookworm.lexicon import LexiconIndex
from bookworm.registry import DictionaryRegistry

SMALL_WORD_LISTS: dict[str, list[str]] = {
    "colors": ["red", "tan", "teal", "rose", "lime", "gold", "aqua", "navy"],
    "mammals": ["cat", "bat", "rat", "yak", "elk", "eland", "ox"],
    "metals": ["zinc", "iron", "tin", "lead", "gold"],
    "words": [
        "eel", "lee", "fee", "feel", "ant", "tan", "bat", "cat", "tab",
        "act", "quiet", "quit", "quite", "tie", "tea", "eat", "ate",
    ],
}


@pytest.fixture
def small_index() -> LexiconIndex:
    """The "words" list as a single index. No file I/O."""
    return LexiconIndex.from_words(SMALL_WORD_LISTS["words"])


@pytest.fixture
def small_registry() -> DictionaryRegistry:
    """Four tiny dictionaries loaded straight from Python lists."""
    registry = DictionaryRegistry()
    for name, words in SMALL_WORD_LISTS.items():
        registry.load(name, words)
    return registry


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """A data directory holding the small word lists as JSON files."""
    for name, words in SMALL_WORD_LISTS.items():
        (tmp_path / f"{name}.json").write_text(json.dumps(words), encoding="utf-8")
    return tmp_path
