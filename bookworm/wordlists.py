"""Loads the JSON word lists bundled in bookworm/data/."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from bookworm.constants import DICTIONARY_NAMES
from bookworm.registry import DictionaryRegistry, LoadError

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "data"


def data_dir_from_env() -> Path:
    """Data directory, overridable with BOOKWORM_DATA_DIR."""
    override = os.environ.get("BOOKWORM_DATA_DIR")
    return Path(override) if override else DEFAULT_DATA_DIR


def read_word_list(path: str | Path) -> object:
    """Parse one word-list file (a JSON array of strings)."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        raise LoadError(path.stem, f"word list not found at {path}") from None
    except (OSError, ValueError) as e:
        raise LoadError(path.stem, str(e)) from e


def load_default_registry(
    data_dir: str | Path | None = None,
    names: Iterable[str] = DICTIONARY_NAMES,
) -> tuple[DictionaryRegistry, dict[str, LoadError]]:
    """Build a registry from ``<data_dir>/<name>.json`` for each name.

    Returns the registry and the per-dictionary load errors. A dictionary
    that fails to load is left out; the others are still loaded.
    """
    base = Path(data_dir) if data_dir is not None else data_dir_from_env()
    registry = DictionaryRegistry()
    errors: dict[str, LoadError] = {}
    sources: list[tuple[str, object]] = []
    for name in names:
        try:
            sources.append((name, read_word_list(base / f"{name}.json")))
        except LoadError as e:
            logger.warning("%s", e)
            errors[name] = e
    errors.update(registry.load_all(sources))
    return registry, errors
