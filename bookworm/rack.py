"""Turns raw user input into a rack of letters."""

from __future__ import annotations

import re

from bookworm.constants import MAX_RACK_SIZE

_NON_LETTERS = re.compile(r"[^a-zA-Z]")


class RackError(ValueError):
    """User input does not describe a usable rack."""


def sanitize_rack(raw: str) -> str:
    """Drop spaces, digits and punctuation; lowercase what is left."""
    return _NON_LETTERS.sub("", raw).lower()


def parse_rack(raw: str, max_size: int = MAX_RACK_SIZE) -> str:
    """Sanitize *raw* and reject racks that are empty or too large."""
    if not raw or not raw.strip():
        raise RackError("Please enter letters")
    letters = sanitize_rack(raw)
    if not letters:
        raise RackError("Please enter valid letters")
    if len(letters) > max_size:
        raise RackError(f"Too many letters: {len(letters)} (max {max_size})")
    return letters
