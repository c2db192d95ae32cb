"""Custom exception hierarchy for word-search generation."""


class WordSearchError(Exception):
    """Base exception for the package."""


class InvalidGridSizeError(WordSearchError, ValueError):
    """Raised when a grid size is not a positive integer."""


class InvalidWordError(WordSearchError, TypeError):
    """Raised when a word list contains a missing or non-string entry."""


class WordListError(WordSearchError):
    """Raised when a word list payload has no usable level data."""


class LLMConfigurationError(WordSearchError):
    """Raised when the AI provider settings are incomplete."""


class LLMAPIError(WordSearchError):
    """Raised when the AI provider responds with an error payload."""


class SessionError(WordSearchError):
    """Raised when a play session is driven out of order."""
