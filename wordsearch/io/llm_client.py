"""HTTP client for OpenAI-compatible chat completion APIs."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, List, Optional

import requests

from ..core.exceptions import LLMAPIError, LLMConfigurationError, WordSearchError
from ..core.models import WordEntry
from ..data.word_lists import sanitize_levels
from ..utils.logger import get_logger
from .prompts import build_game_generation_messages

LOGGER = get_logger(__name__)

COMMUNITY_BASE_URL = "https://openrouter.ai/api/v1"
COMMUNITY_MODEL = "google/gemini-2.5-flash"
DEFAULT_PROXY_URL = "/api/llm-proxy"


class AIProvider(str, Enum):
    COMMUNITY = "community"
    BYOLLM = "byollm"


@dataclass
class LLMSettings:
    """Connection settings for one OpenAI-compatible provider."""

    provider_name: str = "Custom OpenAI-Compatible"
    api_key: str = ""
    base_url: str = ""
    model_name: str = ""

    @property
    def completions_url(self) -> str:
        base = self.base_url.rstrip("/")
        if base.endswith("/chat/completions"):
            return base
        return f"{base}/chat/completions"


def _language_override(settings: LLMSettings, language: str) -> LLMSettings:
    raw_map = os.environ.get("LANGUAGE_MODEL_MAP")
    if not raw_map:
        return settings
    try:
        language_map = json.loads(raw_map)
    except json.JSONDecodeError as exc:
        LOGGER.warning(
            "Could not parse LANGUAGE_MODEL_MAP environment variable (%s); ignoring it", exc
        )
        return settings
    override = language_map.get(language) if isinstance(language_map, dict) else None
    if not isinstance(override, dict) or not override.get("model"):
        return settings
    updated = replace(
        settings,
        model_name=override["model"],
        base_url=override.get("baseURL") or settings.base_url,
    )
    LOGGER.info(
        "Language-specific model override for '%s': model=%s base_url=%s",
        language, updated.model_name, updated.base_url,
    )
    return updated


def resolve_settings(
    provider: AIProvider | str = AIProvider.COMMUNITY,
    byollm: Optional[LLMSettings] = None,
    language: str = "en",
) -> LLMSettings:
    """Pick the settings a request should use.

    User-supplied settings apply only when they carry an API key; otherwise the
    community provider is configured from ``API_KEY`` and
    ``COMMUNITY_MODEL_NAME``.
    """

    if AIProvider(provider) == AIProvider.BYOLLM and byollm is not None and byollm.api_key:
        return _language_override(byollm, language)

    api_key = os.environ.get("API_KEY")
    if not api_key:
        raise LLMConfigurationError(
            "Community provider (OpenRouter) is not configured. Set the API_KEY "
            "environment variable or supply your own LLM settings."
        )
    return LLMSettings(
        provider_name="Community (OpenRouter)",
        api_key=api_key,
        base_url=COMMUNITY_BASE_URL,
        model_name=os.environ.get("COMMUNITY_MODEL_NAME", COMMUNITY_MODEL),
    )


class LLMClient:
    """Minimal client around an OpenAI-compatible ``/chat/completions`` API."""

    def __init__(
        self,
        settings: LLMSettings,
        timeout_seconds: float = 60.0,
        use_proxy: Optional[bool] = None,
        proxy_url: Optional[str] = None,
    ) -> None:
        self.settings = settings
        self.timeout_seconds = timeout_seconds
        if use_proxy is None:
            use_proxy = os.environ.get("USE_LLM_PROXY") == "true"
        self.use_proxy = use_proxy
        self.proxy_url = proxy_url or os.environ.get("LLM_PROXY_URL", DEFAULT_PROXY_URL)

    def _post(self, payload: Dict[str, Any]) -> requests.Response:
        if self.use_proxy:
            LOGGER.debug("Using LLM proxy at %s", self.proxy_url)
            url = self.proxy_url
            headers = {"Content-Type": "application/json"}
        else:
            url = self.settings.completions_url
            headers = {
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self.settings.api_key}",
            }
        try:
            response = requests.post(
                url, headers=headers, json=payload, timeout=self.timeout_seconds
            )
        except requests.RequestException as exc:
            raise LLMAPIError(
                f"Network error contacting {self.settings.provider_name}: {exc}"
            ) from exc
        if not response.ok:
            raise LLMAPIError(
                f"API request failed with status {response.status_code}: "
                f"{self._error_detail(response)}"
            )
        return response

    def chat_completion(
        self,
        messages: List[Dict[str, str]],
        response_format: Optional[Dict[str, str]] = None,
    ) -> str:
        """Send ``messages`` and return the first choice's message content."""

        payload: Dict[str, Any] = {"model": self.settings.model_name, "messages": messages}
        if response_format:
            payload["response_format"] = response_format
        LOGGER.debug(
            "Provider %s, endpoint %s, model %s",
            self.settings.provider_name, self.settings.base_url, self.settings.model_name,
        )
        response = self._post(payload)
        try:
            data = response.json()
        except ValueError as exc:
            raise LLMAPIError("AI provider returned a non-JSON response") from exc

        content = self._extract_content(data)
        if not content:
            raise LLMAPIError("Received an empty or invalid response from the AI provider.")
        return content

    def test_connection(self) -> None:
        """Send a tiny request; raise if the provider rejects it."""

        if not (self.settings.api_key and self.settings.base_url and self.settings.model_name):
            raise LLMConfigurationError("API Key, Base URL, and Model Name are all required.")
        self._post({
            "model": self.settings.model_name,
            "messages": [{"role": "user", "content": "Hello!"}],
            "max_tokens": 5,
            "stream": False,
        })

    @staticmethod
    def _extract_content(payload: Dict[str, Any]) -> Optional[str]:
        choices: List[Dict[str, Any]] = payload.get("choices") or []
        if not choices:
            return None
        message = choices[0].get("message") or {}
        content = message.get("content")
        return content if isinstance(content, str) else None

    @staticmethod
    def _error_detail(response: requests.Response) -> str:
        body = response.text
        try:
            error = response.json().get("error")
        except ValueError:
            error = None
        if isinstance(error, dict) and error.get("message"):
            return f"Provider message: {error['message']}"
        if len(body) > 200:
            return body[:200] + "..."
        return body


class LLMWordListProvider:
    """Word-list provider backed by an :class:`LLMClient`."""

    def __init__(self, client: LLMClient) -> None:
        self.client = client

    def generate(
        self, theme: str, word_count: int, level_count: int = 1, language: str = "en",
    ) -> List[List[WordEntry]]:
        messages = build_game_generation_messages(theme, word_count, level_count, language)
        content = self.client.chat_completion(messages, response_format={"type": "json_object"})
        LOGGER.debug("Raw word-list response: %s", content)
        try:
            parsed = json.loads(content)
        except json.JSONDecodeError as exc:
            raise LLMAPIError(f"AI response is not valid JSON: {exc}") from exc
        levels = parsed.get("levels") if isinstance(parsed, dict) else None
        return sanitize_levels(levels or [])


def generate_game_levels(
    theme: str,
    word_count: int,
    level_count: int,
    language: str,
    provider: AIProvider | str = AIProvider.COMMUNITY,
    byollm: Optional[LLMSettings] = None,
) -> List[List[WordEntry]]:
    """Request themed word lists; return ``[]`` and log when anything fails."""

    try:
        settings = resolve_settings(provider, byollm, language)
        return LLMWordListProvider(LLMClient(settings)).generate(
            theme, word_count, level_count, language
        )
    except WordSearchError as exc:
        LOGGER.error("Error generating game levels: %s", exc)
        return []
