"""Shared constants and enumerations for the word-search generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(Enum):
    """The eight line directions a word may run in, as ``(dx, dy)`` steps."""

    E = (1, 0)
    W = (-1, 0)
    S = (0, 1)
    N = (0, -1)
    SE = (1, 1)
    NW = (-1, -1)
    NE = (1, -1)
    SW = (-1, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


ALL_DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)

# Scripts where a single user-perceived character spans several code points.
COMPLEX_SCRIPT_LANGUAGES: Tuple[str, ...] = ("ta", "hi", "bn")

FILLER_FALLBACK = " "

DEFAULT_GRID_SIZE = 15
DEFAULT_TIME_LIMIT_SECONDS = 300


@dataclass(frozen=True)
class Bounds:
    """Square grid bounds helper."""

    size: int

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size
