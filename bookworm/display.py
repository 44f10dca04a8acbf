"""Terminal rendering of ranked results."""

from __future__ import annotations

from bookworm.solver import ScoredWord


def render_table(name: str, words: list[ScoredWord]) -> str:
    """Render one dictionary's ranked words as a small table."""
    lines: list[str] = [f"=== {name} ==="]
    if not words:
        lines.append("  (no words found)")
        return "\n".join(lines)

    width = max(len("Word"), *(len(sw.word) for sw in words))
    lines.append(f"  {'#':>2}  {'Word':<{width}}  Strength")
    lines.append("  " + "-" * (width + 14))
    for rank, sw in enumerate(words, start=1):
        lines.append(f"  {rank:>2}  {sw.word:<{width}}  {sw.strength:8.1f}")
    return "\n".join(lines)


def render_results(results: dict[str, list[ScoredWord]]) -> str:
    if not results:
        return "(no dictionaries loaded)"
    return "\n\n".join(render_table(name, words) for name, words in results.items())


def print_results(results: dict[str, list[ScoredWord]]) -> None:
    """Print every dictionary's table to the terminal."""
    print("\n" + render_results(results))
