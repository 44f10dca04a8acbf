"""CLI entry point for the Bookworm solver."""

from __future__ import annotations

import argparse
import logging
import sys

from bookworm.constants import DICTIONARY_NAMES, MAX_RESULTS, MIN_WORD_LENGTH
from bookworm.display import print_results
from bookworm.rack import RackError, parse_rack
from bookworm.registry import DictionaryRegistry
from bookworm.solver import RackSolver
from bookworm.wordlists import load_default_registry


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Bookworm Solver: find the strongest words for your letters",
    )
    parser.add_argument(
        "--letters", "-l",
        type=str,
        help='Letters on the board, e.g. "quietrsa" (max 16)',
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default=None,
        help="Directory holding the <name>.json word lists "
             "(default: $BOOKWORM_DATA_DIR or the bundled data/)",
    )
    parser.add_argument(
        "--dictionary", "-d",
        action="append",
        dest="dictionaries",
        choices=DICTIONARY_NAMES,
        help="Only search this dictionary (repeatable)",
    )
    parser.add_argument(
        "--top", "-n",
        type=positive_int,
        default=MAX_RESULTS,
        help=f"Words to show per dictionary (default: {MAX_RESULTS})",
    )
    parser.add_argument(
        "--min-length",
        type=positive_int,
        default=MIN_WORD_LENGTH,
        help=f"Shortest word to report (default: {MIN_WORD_LENGTH})",
    )
    return parser.parse_args(argv)


def get_letters_from_input() -> str:
    """Prompt the user to type their letters."""
    return input("Enter your letters (max 16): ")


def load_registry(args: argparse.Namespace) -> DictionaryRegistry:
    names = args.dictionaries or DICTIONARY_NAMES
    # Load failures are logged by the loader
    registry, _ = load_default_registry(args.data_dir, names=names)
    if len(registry) == 0:
        print("No dictionaries could be loaded.")
        sys.exit(1)
    return registry


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
    args = parse_args(argv)

    # 1. Get letters
    raw = args.letters if args.letters is not None else get_letters_from_input()
    try:
        letters = parse_rack(raw)
    except RackError as e:
        print(e)
        sys.exit(1)

    # 2. Load dictionaries
    print("Loading dictionaries...")
    registry = load_registry(args)
    for name, index in registry.items():
        print(f"  {name}: {index.word_count} words")

    # 3. Solve and display
    print(f"\nSearching with {len(letters)} letters: {' '.join(letters)}")
    solver = RackSolver(registry, min_length=args.min_length, limit=args.top)
    print_results(solver.find_solutions(letters))


if __name__ == "__main__":
    main()
