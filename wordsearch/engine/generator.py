"""Word-search puzzle generation.

Words are placed longest first. For each word the eight directions are
shuffled, and for each direction every start cell is shuffled; the first
combination that fits wins. There is no backtracking: a word that finds no
slot in its single scan is dropped, even if a different ordering of earlier
placements would have made room for it. Remaining cells are then filled with
graphemes drawn from the input words.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..core.constants import ALL_DIRECTIONS, FILLER_FALLBACK, Bounds, Direction
from ..core.exceptions import InvalidGridSizeError, InvalidWordError
from ..core.models import PlacedWord, Position, PuzzleResult
from ..utils.logger import get_logger
from .segmentation import Segmenter, get_segmenter

LOGGER = get_logger(__name__)

Cells = List[List[Optional[str]]]


@dataclass
class SegmentedWord:
    text: str
    segments: List[str]

    @property
    def length(self) -> int:
        return len(self.segments)


def can_place_word(
    segments: Sequence[str],
    cells: Cells,
    start: Position,
    direction: Direction,
    bounds: Bounds,
) -> bool:
    """Return True if ``segments`` fit from ``start`` along ``direction``.

    Occupied cells are accepted when they already hold the same grapheme,
    compared case-insensitively.
    """

    for i, segment in enumerate(segments):
        x = start.x + i * direction.dx
        y = start.y + i * direction.dy
        if not bounds.contains(x, y):
            return False
        current = cells[y][x]
        if current is not None and current.upper() != segment.upper():
            return False
    return True


def place_word(
    segments: Sequence[str],
    cells: Cells,
    start: Position,
    direction: Direction,
) -> List[Position]:
    positions: List[Position] = []
    for i, segment in enumerate(segments):
        x = start.x + i * direction.dx
        y = start.y + i * direction.dy
        cells[y][x] = segment
        positions.append(Position(x=x, y=y))
    return positions


class PuzzleGenerator:
    """Single-use generator: one instance builds one grid."""

    def __init__(
        self,
        size: int,
        language: str = "en",
        rng: Optional[random.Random] = None,
        segmenter: Optional[Segmenter] = None,
    ) -> None:
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise InvalidGridSizeError(f"Grid size must be a positive integer, got {size!r}")
        self.size = size
        self.language = language
        self.bounds = Bounds(size)
        self.rng = rng or random.Random()
        self.segmenter = segmenter or get_segmenter(language)
        self.cells: Cells = [[None] * size for _ in range(size)]

    def generate(self, words: Sequence[str]) -> PuzzleResult:
        segmented = self._segment_all(words)
        pool = list(dict.fromkeys(seg for word in segmented for seg in word.segments))

        # sorted() is stable, so equal-length words keep their input order
        ordered = sorted(segmented, key=lambda w: w.length, reverse=True)

        placed: List[PlacedWord] = []
        for word in ordered:
            positions = self._try_place(word)
            if positions is None:
                LOGGER.debug(
                    "Dropped '%s' (%d graphemes) from %dx%d grid",
                    word.text, word.length, self.size, self.size,
                )
                continue
            placed.append(PlacedWord(text=word.text.upper(), positions=positions))

        grid = self._fill(pool)
        LOGGER.info(
            "Placed %d/%d words in %dx%d grid (language=%s)",
            len(placed), len(segmented), self.size, self.size, self.language,
        )
        return PuzzleResult(
            grid=grid, placed_words=placed, size=self.size, language=self.language
        )

    def _segment_all(self, words: Sequence[str]) -> List[SegmentedWord]:
        segmented: List[SegmentedWord] = []
        for index, word in enumerate(words):
            if not isinstance(word, str):
                raise InvalidWordError(
                    f"Word list entry {index} must be a string, got {type(word).__name__}"
                )
            segmented.append(SegmentedWord(text=word, segments=self.segmenter.segment(word)))
        return segmented

    def _try_place(self, word: SegmentedWord) -> Optional[List[Position]]:
        if word.length == 0 or word.length > self.size:
            return None
        directions = list(ALL_DIRECTIONS)
        self.rng.shuffle(directions)
        for direction in directions:
            starts = [Position(x=x, y=y) for y in range(self.size) for x in range(self.size)]
            self.rng.shuffle(starts)
            for start in starts:
                if can_place_word(word.segments, self.cells, start, direction, self.bounds):
                    return place_word(word.segments, self.cells, start, direction)
        return None

    def _fill(self, pool: List[str]) -> List[List[str]]:
        grid: List[List[str]] = []
        for row in self.cells:
            grid.append([
                cell if cell is not None else (self.rng.choice(pool) if pool else FILLER_FALLBACK)
                for cell in row
            ])
        return grid


def generate_puzzle(
    words: Sequence[str],
    size: int,
    language: str = "en",
    rng: Optional[random.Random] = None,
    segmenter: Optional[Segmenter] = None,
) -> PuzzleResult:
    """Place ``words`` into a fresh ``size`` x ``size`` grid and fill the rest."""

    return PuzzleGenerator(size, language, rng=rng, segmenter=segmenter).generate(words)
