"""Data models supporting the word-search generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Position:
    """A grid coordinate: ``x`` is the column, ``y`` the row."""

    x: int
    y: int

    def to_jsonable(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y}


@dataclass
class PlacedWord:
    """A word written into the grid, with the cells it occupies in order."""

    text: str
    positions: List[Position]
    hint: str = ""
    found: bool = False

    @property
    def start(self) -> Position:
        return self.positions[0]

    @property
    def end(self) -> Position:
        return self.positions[-1]

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "hint": self.hint,
            "found": self.found,
            "positions": [pos.to_jsonable() for pos in self.positions],
        }


@dataclass
class PuzzleResult:
    """Output of a single generation call."""

    grid: List[List[str]]
    placed_words: List[PlacedWord]
    size: int
    language: str

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "size": self.size,
            "language": self.language,
            "grid": [list(row) for row in self.grid],
            "placed_words": [word.to_jsonable() for word in self.placed_words],
        }


@dataclass
class WordEntry:
    """A themed word and its one-sentence hint."""

    word: str
    hint: str = ""

    def to_jsonable(self) -> Dict[str, str]:
        return {"word": self.word, "hint": self.hint}

    @classmethod
    def from_jsonable(cls, data: Dict[str, Any]) -> "WordEntry":
        return cls(word=str(data["word"]), hint=str(data.get("hint", "")))


@dataclass
class GameLevel:
    level: int
    grid_size: int
    time_limit_seconds: int
    words: List[WordEntry] = field(default_factory=list)

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "level": self.level,
            "gridSize": self.grid_size,
            "timeLimitSeconds": self.time_limit_seconds,
            "words": [entry.to_jsonable() for entry in self.words],
        }

    @classmethod
    def from_jsonable(cls, data: Dict[str, Any]) -> "GameLevel":
        return cls(
            level=int(data["level"]),
            grid_size=int(data["gridSize"]),
            time_limit_seconds=int(data["timeLimitSeconds"]),
            words=[WordEntry.from_jsonable(w) for w in data.get("words", [])],
        )


@dataclass
class GameDefinition:
    """A playable game: a theme and one or more levels of words."""

    id: str
    theme: str
    language: str
    levels: List[GameLevel] = field(default_factory=list)

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "theme": self.theme,
            "language": self.language,
            "levels": [level.to_jsonable() for level in self.levels],
        }

    @classmethod
    def from_jsonable(cls, data: Dict[str, Any]) -> "GameDefinition":
        return cls(
            id=str(data["id"]),
            theme=str(data["theme"]),
            language=str(data["language"]),
            levels=[GameLevel.from_jsonable(level) for level in data.get("levels", [])],
        )


@dataclass
class GameHistory:
    """Outcome of one play-through, as shown in the history panel."""

    theme: str
    language: str
    levels_completed: int
    total_levels: int
    date: str
    won: bool
    game_id: Optional[str] = None

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "theme": self.theme,
            "language": self.language,
            "levelsCompleted": self.levels_completed,
            "totalLevels": self.total_levels,
            "date": self.date,
            "won": self.won,
            "gameId": self.game_id,
        }

    @classmethod
    def from_jsonable(cls, data: Dict[str, Any]) -> "GameHistory":
        return cls(
            theme=str(data["theme"]),
            language=str(data["language"]),
            levels_completed=int(data["levelsCompleted"]),
            total_levels=int(data["totalLevels"]),
            date=str(data["date"]),
            won=bool(data["won"]),
            game_id=data.get("gameId"),
        )
