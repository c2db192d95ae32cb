"""Player selection helpers: turning a drag into a line and checking it."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from ..core.models import Position
from .segmentation import Segmenter, reverse_graphemes


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def line_between(start: Position, end: Position) -> List[Position]:
    """Return the cells from ``start`` to ``end`` inclusive.

    Only rows, columns and 45-degree diagonals produce a full line. Any other
    pair of cells yields just the two endpoints, which never matches a word.
    """

    dx = end.x - start.x
    dy = end.y - start.y
    if dx == 0 and dy == 0:
        return [start]
    if dx != 0 and dy != 0 and abs(dx) != abs(dy):
        return [start, end]

    step_x, step_y = _sign(dx), _sign(dy)
    steps = max(abs(dx), abs(dy))
    return [Position(x=start.x + i * step_x, y=start.y + i * step_y) for i in range(steps + 1)]


def read_selection(grid: Sequence[Sequence[str]], positions: Iterable[Position]) -> str:
    return "".join(grid[pos.y][pos.x] for pos in positions)


def match_selection(
    grid: Sequence[Sequence[str]],
    selection: Sequence[Position],
    words: Iterable[str],
    language: str = "en",
    segmenter: Optional[Segmenter] = None,
) -> Optional[str]:
    """Return the uppercase word spelled by ``selection``, forwards or backwards."""

    if len(selection) < 2:
        return None
    selected = read_selection(grid, selection).upper()
    reversed_selected = reverse_graphemes(selected, language, segmenter)
    upper_words = {word.upper() for word in words}
    if selected in upper_words:
        return selected
    if reversed_selected in upper_words:
        return reversed_selected
    return None
