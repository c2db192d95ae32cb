"""Play-session state: level progression, found words and the level timer."""

from __future__ import annotations

import random
import time
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, List, Optional

from ..core.exceptions import SessionError
from ..core.models import GameDefinition, GameHistory, GameLevel, PlacedWord, Position, PuzzleResult
from ..utils.logger import get_logger
from .generator import generate_puzzle
from .selection import line_between, match_selection

LOGGER = get_logger(__name__)

NO_HINT = "No hint available."


class SessionState(str, Enum):
    IDLE = "IDLE"
    PLAYING = "PLAYING"
    LEVEL_COMPLETE = "LEVEL_COMPLETE"
    WON = "WON"
    LOST = "LOST"
    SHOWING_ANSWERS = "SHOWING_ANSWERS"


class GameSession:
    """Drives one play-through of a :class:`GameDefinition`."""

    def __init__(
        self,
        definition: GameDefinition,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if not definition.levels:
            raise SessionError(f"Game '{definition.theme}' has no levels")
        self.definition = definition
        self.rng = rng or random.Random()
        self.clock = clock
        self.state = SessionState.IDLE
        self.level_index = 0
        self.puzzle: Optional[PuzzleResult] = None
        self._started_at = 0.0

    # ------------------------------------------------------------------
    # Level lifecycle
    # ------------------------------------------------------------------
    @property
    def level(self) -> GameLevel:
        return self.definition.levels[self.level_index]

    @property
    def is_last_level(self) -> bool:
        return self.level_index >= len(self.definition.levels) - 1

    @property
    def words(self) -> List[PlacedWord]:
        return self.puzzle.placed_words if self.puzzle else []

    def start_level(self, index: int = 0) -> PuzzleResult:
        if not 0 <= index < len(self.definition.levels):
            raise SessionError(f"Level index {index} out of range")
        self.level_index = index
        level = self.level
        puzzle = generate_puzzle(
            [entry.word for entry in level.words],
            level.grid_size,
            self.definition.language,
            rng=self.rng,
        )
        hints = {}
        for entry in level.words:
            hints.setdefault(entry.word.upper(), entry.hint)
        for placed in puzzle.placed_words:
            placed.hint = hints.get(placed.text) or NO_HINT
            placed.found = False

        self.puzzle = puzzle
        self._started_at = self.clock()
        self.state = SessionState.PLAYING
        LOGGER.info(
            "Level %d/%d started: %d words, %ds",
            index + 1, len(self.definition.levels), len(puzzle.placed_words),
            level.time_limit_seconds,
        )
        return puzzle

    def next_level(self) -> PuzzleResult:
        if self.state != SessionState.LEVEL_COMPLETE:
            raise SessionError(f"Cannot advance from state {self.state.value}")
        return self.start_level(self.level_index + 1)

    def show_answers(self) -> None:
        if self.state != SessionState.PLAYING:
            raise SessionError(f"Cannot show answers from state {self.state.value}")
        self.state = SessionState.SHOWING_ANSWERS

    # ------------------------------------------------------------------
    # Timer
    # ------------------------------------------------------------------
    def time_left(self) -> float:
        if self.state == SessionState.IDLE:
            return float(self.level.time_limit_seconds)
        elapsed = self.clock() - self._started_at
        return max(0.0, self.level.time_limit_seconds - elapsed)

    def check_time(self) -> bool:
        """Move a running level to LOST once its time is up. Returns True if expired."""

        if self.state == SessionState.PLAYING and self.time_left() <= 0:
            self.state = SessionState.LOST
            LOGGER.info("Level %d lost: time is up", self.level_index + 1)
            return True
        return False

    # ------------------------------------------------------------------
    # Play
    # ------------------------------------------------------------------
    def submit_selection(self, start: Position, end: Position) -> Optional[PlacedWord]:
        """Check a drag from ``start`` to ``end``; return the word it found, if any."""

        if self.check_time() or self.state != SessionState.PLAYING or self.puzzle is None:
            return None
        selection = line_between(start, end)
        matched = match_selection(
            self.puzzle.grid,
            selection,
            [word.text for word in self.words],
            self.definition.language,
        )
        if matched is None:
            return None

        found: Optional[PlacedWord] = None
        for word in self.words:
            if word.text == matched and not word.found:
                word.found = True
                found = word
                break
        if found is None:
            return None

        LOGGER.debug("Found '%s'", found.text)
        if all(word.found for word in self.words):
            self.state = SessionState.WON if self.is_last_level else SessionState.LEVEL_COMPLETE
            LOGGER.info("Level %d complete", self.level_index + 1)
        return found

    def remaining_words(self) -> List[PlacedWord]:
        return [word for word in self.words if not word.found]

    def history_entry(self) -> GameHistory:
        """Summarise the session for the history log in its current state."""

        total = len(self.definition.levels)
        if self.state == SessionState.WON:
            completed = total
        elif self.state == SessionState.LEVEL_COMPLETE:
            completed = self.level_index + 1
        else:
            completed = self.level_index
        return GameHistory(
            theme=self.definition.theme,
            language=self.definition.language,
            levels_completed=completed,
            total_levels=total,
            date=datetime.now(timezone.utc).isoformat(),
            won=self.state == SessionState.WON,
            game_id=self.definition.id,
        )
