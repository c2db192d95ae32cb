"""Word-list sanitising and word providers."""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Protocol, Sequence

from ..core.exceptions import WordListError
from ..core.models import WordEntry
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

WHITESPACE_RE = re.compile(r"\s+")


def sanitize_word(word: str) -> str:
    """Return ``word`` uppercased with all whitespace removed."""

    return WHITESPACE_RE.sub("", word).upper()


def sanitize_levels(levels: Sequence[Dict[str, Any]]) -> List[List[WordEntry]]:
    """Turn a ``[{level, words: [{word, hint}]}]`` payload into clean word lists.

    Levels are ordered by their ``level`` number since providers do not always
    return them in order. Words that are empty after sanitising are dropped.
    """

    if not levels:
        raise WordListError("AI response did not contain valid level data.")

    ordered = sorted(levels, key=lambda item: item.get("level", 0))
    result: List[List[WordEntry]] = []
    for level in ordered:
        entries: List[WordEntry] = []
        for item in level.get("words") or []:
            word = item.get("word")
            if not isinstance(word, str):
                continue
            cleaned = sanitize_word(word)
            if not cleaned:
                continue
            hint = item.get("hint")
            entries.append(WordEntry(word=cleaned, hint=hint if isinstance(hint, str) else ""))
        result.append(entries)
    return result


def parse_word_entries(raw_words: Iterable[str]) -> List[WordEntry]:
    """Parse ``WORD`` or ``WORD:hint`` strings. Blank items are skipped."""

    entries: List[WordEntry] = []
    for item in raw_words:
        item = item.strip()
        if not item:
            continue
        word, _, hint = item.partition(":")
        cleaned = sanitize_word(word)
        if cleaned:
            entries.append(WordEntry(cleaned, hint.strip()))
    return entries


class WordListProvider(Protocol):
    """Protocol implemented by all sources of themed word lists."""

    def generate(
        self, theme: str, word_count: int, level_count: int = 1, language: str = "en",
    ) -> List[List[WordEntry]]:
        ...


class UserWordListProvider:
    """Serves a fixed, user-supplied word list as every requested level."""

    def __init__(self, raw_words: Iterable[str]) -> None:
        self._entries = parse_word_entries(raw_words)

    def generate(
        self, theme: str, word_count: int, level_count: int = 1, language: str = "en",
    ) -> List[List[WordEntry]]:
        if not self._entries:
            raise WordListError("User word list is empty")
        LOGGER.info(
            "User word list provides %d words for %d level(s)",
            min(word_count, len(self._entries)), level_count,
        )
        return [list(self._entries[:word_count]) for _ in range(level_count)]
