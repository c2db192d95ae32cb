"""Persistent store for game history, saved games and player settings.

Each key is a JSON document under ``local_db/wordsearch/``. Storage is a
convenience: read and write failures are logged and the caller gets the
default value, never an exception. API keys are held in memory for the
lifetime of the store only and are never written to disk.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional

from ..core.models import GameDefinition, GameHistory
from ..io.llm_client import AIProvider, COMMUNITY_MODEL, LLMSettings
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

DEFAULT_STORE_DIR = Path("local_db/wordsearch")

HISTORY_KEY = "wordSearchGameHistory"
AVAILABLE_GAMES_KEY = "wordSearchAvailableGames"
THEME_KEY = "wordSearchTheme"
LANGUAGE_KEY = "wordSearchLanguage"
AI_PROVIDER_SETTINGS_KEY = "wordSearchAISettings"

ALL_KEYS = (HISTORY_KEY, AVAILABLE_GAMES_KEY, THEME_KEY, LANGUAGE_KEY, AI_PROVIDER_SETTINGS_KEY)


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class GameStore:
    """Save and load player data as JSON documents."""

    def __init__(self, store_dir: Path | str = DEFAULT_STORE_DIR) -> None:
        self.store_dir = Path(store_dir)
        self.store_dir.mkdir(parents=True, exist_ok=True)
        self._session_api_key: Optional[str] = None

    # ------------------------------------------------------------------
    # History and games
    # ------------------------------------------------------------------

    def save_game_history(self, history: List[GameHistory]) -> None:
        self._write(HISTORY_KEY, [entry.to_jsonable() for entry in history])

    def load_game_history(self) -> List[GameHistory]:
        data = self._read(HISTORY_KEY)
        if not isinstance(data, list):
            return []
        try:
            return [GameHistory.from_jsonable(item) for item in data]
        except (KeyError, TypeError, ValueError) as exc:
            LOGGER.error("Failed to load game history: %s", exc)
            return []

    def append_history(self, entry: GameHistory) -> List[GameHistory]:
        history = [entry] + self.load_game_history()
        self.save_game_history(history)
        return history

    def save_available_games(self, games: List[GameDefinition]) -> None:
        self._write(AVAILABLE_GAMES_KEY, [game.to_jsonable() for game in games])

    def load_available_games(self) -> List[GameDefinition]:
        data = self._read(AVAILABLE_GAMES_KEY)
        if not isinstance(data, list):
            return []
        try:
            return [GameDefinition.from_jsonable(item) for item in data]
        except (KeyError, TypeError, ValueError) as exc:
            LOGGER.error("Failed to load available games: %s", exc)
            return []

    # ------------------------------------------------------------------
    # Preferences
    # ------------------------------------------------------------------

    def save_theme(self, theme: Theme) -> None:
        self._write(THEME_KEY, Theme(theme).value)

    def load_theme(self) -> Theme:
        stored = self._read(THEME_KEY)
        if stored in {t.value for t in Theme}:
            return Theme(stored)
        return Theme.SYSTEM

    def save_language(self, language: str) -> None:
        self._write(LANGUAGE_KEY, language)

    def load_language(self, default: str = "en") -> str:
        stored = self._read(LANGUAGE_KEY)
        return stored if isinstance(stored, str) and stored else default

    def save_ai_settings(self, provider: AIProvider | str, byollm: Optional[LLMSettings] = None) -> None:
        provider = AIProvider(provider)
        doc: dict = {"provider": provider.value}
        if provider == AIProvider.BYOLLM and byollm is not None:
            doc["byollm"] = {
                "providerName": byollm.provider_name,
                "baseURL": byollm.base_url,
                "modelName": byollm.model_name,
            }
            if byollm.api_key:
                self._session_api_key = byollm.api_key
        else:
            doc["communityModel"] = COMMUNITY_MODEL
            self._session_api_key = None
        self._write(AI_PROVIDER_SETTINGS_KEY, doc)

    def load_ai_settings(self) -> tuple[AIProvider, LLMSettings]:
        """Return the saved provider and BYOLLM settings, defaulting to community."""

        defaults = (AIProvider.COMMUNITY, LLMSettings())
        doc = self._read(AI_PROVIDER_SETTINGS_KEY)
        if not isinstance(doc, dict):
            return defaults
        try:
            provider = AIProvider(doc.get("provider", AIProvider.COMMUNITY.value))
        except ValueError:
            LOGGER.error("Unknown AI provider in settings: %s", doc.get("provider"))
            return defaults
        if provider != AIProvider.BYOLLM:
            return provider, LLMSettings()
        stored = doc.get("byollm") or {}
        settings = LLMSettings(
            provider_name=stored.get("providerName", LLMSettings.provider_name),
            base_url=stored.get("baseURL", ""),
            model_name=stored.get("modelName", ""),
            api_key=self._session_api_key or "",
        )
        return provider, settings

    def clear(self) -> None:
        """Remove every stored document and forget the session API key."""

        for key in ALL_KEYS:
            path = self._path(key)
            try:
                path.unlink(missing_ok=True)
            except OSError as exc:
                LOGGER.error("Failed to clear %s: %s", path.name, exc)
        self._session_api_key = None
        LOGGER.info("Application data cleared from %s", self.store_dir)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _path(self, key: str) -> Path:
        return self.store_dir / f"{key}.json"

    def _read(self, key: str) -> Any:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            LOGGER.error("Failed to load %s: %s", path.name, exc)
            return None

    def _write(self, key: str, value: Any) -> None:
        path = self._path(key)
        try:
            path.write_text(json.dumps(value, ensure_ascii=False, indent=2), encoding="utf-8")
        except (OSError, TypeError) as exc:
            LOGGER.error("Failed to save %s: %s", path.name, exc)
