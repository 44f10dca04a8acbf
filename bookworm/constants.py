"""Bookworm constants: letter strengths and search/result limits."""

# Letter strength weights used to rank words
LETTER_STRENGTH: dict[str, float] = {
    "a": 1, "d": 1, "e": 1, "g": 1, "i": 1, "l": 1,
    "n": 1, "o": 1, "r": 1, "s": 1, "t": 1, "u": 1,
    "b": 1.25, "c": 1.25, "f": 1.25, "h": 1.25, "m": 1.25, "p": 1.25,
    "v": 1.5, "w": 1.5, "y": 1.5,
    "j": 1.75, "k": 1.75, "q": 1.75,
    "x": 2, "z": 2,
}

# "qu" is a single tile in Bookworm and is scored as one unit
QU_DIGRAPH = "qu"
QU_STRENGTH = 2.75

MIN_WORD_LENGTH = 3
MAX_RESULTS = 10
MAX_RACK_SIZE = 16

# Word lists bundled under bookworm/data/, in display order
DICTIONARY_NAMES: tuple[str, ...] = ("colors", "mammals", "metals", "words")
