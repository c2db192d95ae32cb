import unittest
from unittest.mock import MagicMock

from wordsearch.core.exceptions import InvalidGridSizeError, WordListError
from wordsearch.core.models import GameDefinition, WordEntry
from wordsearch.data.word_lists import UserWordListProvider
from wordsearch.engine.maker import GameMaker


class GameMakerTests(unittest.TestCase):
    def test_builds_one_level_per_request(self) -> None:
        provider = MagicMock()
        provider.generate.side_effect = [
            [[WordEntry("CAT", "Pet")]],
            [[WordEntry("OCELOT", "Wild cat")]],
        ]
        game = GameMaker(provider).make_game(
            "cats", language="en", word_count=1, level_count=2, grid_size=8, time_per_level=90
        )
        self.assertEqual(provider.generate.call_count, 2)
        provider.generate.assert_called_with("cats", 1, level_count=1, language="en")
        self.assertEqual([level.level for level in game.levels], [1, 2])
        self.assertEqual(game.levels[1].words, [WordEntry("OCELOT", "Wild cat")])
        self.assertEqual(game.levels[0].grid_size, 8)
        self.assertEqual(game.levels[0].time_limit_seconds, 90)
        self.assertTrue(game.id)

    def test_empty_level_raises(self) -> None:
        provider = MagicMock()
        provider.generate.return_value = [[]]
        with self.assertRaises(WordListError):
            GameMaker(provider).make_game("void")

    def test_invalid_grid_size_raises(self) -> None:
        with self.assertRaises(InvalidGridSizeError):
            GameMaker(UserWordListProvider(["cat"])).make_game("x", grid_size=0)

    def test_round_trips_through_json(self) -> None:
        game = GameMaker(UserWordListProvider(["cat:Pet"])).make_game("pets", grid_size=5)
        self.assertEqual(GameDefinition.from_jsonable(game.to_jsonable()), game)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
