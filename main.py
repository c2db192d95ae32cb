"""CLI entrypoint for the word-search puzzle generator."""

from __future__ import annotations

import argparse
import json
import logging
import random
from pathlib import Path
from typing import Any, Dict, List

from wordsearch.core.constants import DEFAULT_GRID_SIZE, DEFAULT_TIME_LIMIT_SECONDS
from wordsearch.core.exceptions import WordSearchError
from wordsearch.data.word_lists import UserWordListProvider, WordListProvider
from wordsearch.engine.game_store import GameStore
from wordsearch.engine.maker import GameMaker
from wordsearch.engine.session import GameSession
from wordsearch.io.llm_client import LLMClient, LLMWordListProvider, resolve_settings
from wordsearch.utils.logger import configure_logging
from wordsearch.utils.pretty import print_puzzle_stats


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate word-search puzzles")
    parser.add_argument("--size", type=int, default=DEFAULT_GRID_SIZE, help="Grid size in cells")
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Explicit words (format: WORD or WORD:Hint)",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one WORD or WORD:Hint entry per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--theme", type=str, default="", help="Theme for AI-generated word lists")
    parser.add_argument("--language", type=str, default="en", help="Language tag, e.g. en, hi, ta")
    parser.add_argument("--word-count", type=int, default=10, help="Words per level")
    parser.add_argument("--levels", type=int, default=1, help="Number of levels")
    parser.add_argument(
        "--time-per-level",
        type=int,
        default=DEFAULT_TIME_LIMIT_SECONDS,
        help="Time limit per level in seconds",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--save", action="store_true", help="Save the game to the local store")
    parser.add_argument(
        "--store-dir",
        type=Path,
        default=Path("local_db/wordsearch"),
        help="Directory for saved games and settings",
    )
    parser.add_argument("--show-answers", action="store_true", help="Blank out filler cells")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    user_words: List[str] = []
    if args.words:
        user_words.extend(args.words)
    if args.words_file:
        user_words.extend(parse_words_file(args.words_file))
    if not user_words and not args.theme:
        parser.error("provide --theme or --words / --words-file")
    if args.size <= 0:
        parser.error("--size must be positive")

    store = GameStore(args.store_dir)
    provider: WordListProvider
    try:
        if user_words:
            provider = UserWordListProvider(user_words)
        else:
            ai_provider, byollm = store.load_ai_settings()
            settings = resolve_settings(ai_provider, byollm, args.language)
            provider = LLMWordListProvider(LLMClient(settings))
        game = GameMaker(provider).make_game(
            theme=args.theme or "custom",
            language=args.language,
            word_count=args.word_count,
            level_count=args.levels,
            grid_size=args.size,
            time_per_level=args.time_per_level,
        )
    except WordSearchError as exc:
        parser.exit(1, f"error: {exc}\n")

    if args.save:
        store.save_available_games([game] + store.load_available_games())

    session = GameSession(game, rng=random.Random(args.seed))
    puzzles: List[Dict[str, Any]] = []
    for index, game_level in enumerate(game.levels):
        puzzle = session.start_level(index)
        if not args.output:
            print(f"\n=== Level {game_level.level} ===")
            print_puzzle_stats(puzzle, len(game_level.words), show_answers=args.show_answers)
        puzzles.append(puzzle.to_jsonable())

    if args.output:
        payload = {"game": game.to_jsonable(), "puzzles": puzzles, "seed": args.seed}
        args.output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


if __name__ == "__main__":  # pragma: no cover
    main()
