"""Pretty-print helpers for word-search grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Set, Tuple

if TYPE_CHECKING:
    from ..core.models import PuzzleResult


def format_grid(puzzle: PuzzleResult, *, show_answers: bool = False) -> str:
    """Render the grid with row/column headers.

    With ``show_answers`` every cell outside a placed word is shown as ``.``.
    """

    answer_cells: Set[Tuple[int, int]] = set()
    if show_answers:
        for word in puzzle.placed_words:
            answer_cells.update((pos.x, pos.y) for pos in word.positions)

    size = puzzle.size
    lines = ["    " + " ".join(f"{c:>2}" for c in range(size))]
    lines.append("    " + "-" * (3 * size - 1))
    for y, row in enumerate(puzzle.grid):
        symbols = [
            cell if not show_answers or (x, y) in answer_cells else "."
            for x, cell in enumerate(row)
        ]
        lines.append(f"{y:>2} | " + " ".join(f"{symbol:>2}" for symbol in symbols))
    return "\n".join(lines)


def print_puzzle_stats(puzzle: PuzzleResult, requested: int, *, show_answers: bool = False, stream=None) -> None:
    """Print grid, placed words and a short summary."""

    stream = stream or sys.stdout
    print(format_grid(puzzle, show_answers=show_answers), file=stream)

    total_cells = puzzle.size * puzzle.size
    used = {(pos.x, pos.y) for word in puzzle.placed_words for pos in word.positions}
    lengths = Counter(len(word.positions) for word in puzzle.placed_words)

    print(file=stream)
    print("--- Words ---", file=stream)
    for word in puzzle.placed_words:
        start, end = word.start, word.end
        hint = f"  {word.hint}" if word.hint else ""
        print(f"  {word.text:<16} ({start.x},{start.y}) -> ({end.x},{end.y}){hint}", file=stream)

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {puzzle.size} x {puzzle.size} ({total_cells} cells)", file=stream)
    print(f"  Placed:        {len(puzzle.placed_words)}/{requested}", file=stream)
    print(f"  Word cells:    {len(used)} ({len(used) / total_cells * 100:.0f}%)", file=stream)
    if lengths:
        dist_parts = [f"{length}:{count}" for length, count in sorted(lengths.items())]
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)
