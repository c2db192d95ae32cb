"""Build playable game definitions from a word-list provider."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import List

from ..core.constants import DEFAULT_GRID_SIZE, DEFAULT_TIME_LIMIT_SECONDS
from ..core.exceptions import InvalidGridSizeError, WordListError
from ..core.models import GameDefinition, GameLevel, WordEntry
from ..data.word_lists import WordListProvider
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class GameMaker:
    """Requests word lists one level at a time and assembles a game."""

    def __init__(self, provider: WordListProvider) -> None:
        self.provider = provider

    def make_game(
        self,
        theme: str,
        language: str = "en",
        word_count: int = 10,
        level_count: int = 1,
        grid_size: int = DEFAULT_GRID_SIZE,
        time_per_level: int = DEFAULT_TIME_LIMIT_SECONDS,
    ) -> GameDefinition:
        if grid_size <= 0:
            raise InvalidGridSizeError(f"Grid size must be a positive integer, got {grid_size!r}")

        word_lists: List[List[WordEntry]] = []
        for index in range(level_count):
            LOGGER.info("Generating level %d of %d for theme '%s'", index + 1, level_count, theme)
            levels = self.provider.generate(theme, word_count, level_count=1, language=language)
            if not levels or not levels[0]:
                raise WordListError(f"AI failed to generate words for level {index + 1}.")
            word_lists.append(levels[0])

        definition = GameDefinition(
            id=self._new_id(),
            theme=theme,
            language=language,
            levels=[
                GameLevel(
                    level=index + 1,
                    grid_size=grid_size,
                    time_limit_seconds=time_per_level,
                    words=words,
                )
                for index, words in enumerate(word_lists)
            ],
        )
        LOGGER.info("Game %s created with %d level(s)", definition.id, len(definition.levels))
        return definition

    @staticmethod
    def _new_id() -> str:
        ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
        return f"{ts}_{uuid.uuid4().hex[:8]}"
