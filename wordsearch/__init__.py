"""Word-search puzzle maker and player.

This package exposes the public API surface via:

- ``wordsearch.engine.generator.generate_puzzle``: places words into a grid.
- ``wordsearch.engine.session.GameSession``: runs a timed play-through.
- ``wordsearch.engine.maker.GameMaker``: builds games from word-list providers.
"""

from .engine.generator import PuzzleGenerator, generate_puzzle
from .engine.maker import GameMaker
from .engine.session import GameSession, SessionState

__all__ = [
    "PuzzleGenerator",
    "generate_puzzle",
    "GameMaker",
    "GameSession",
    "SessionState",
]

__version__ = "0.1.0"
