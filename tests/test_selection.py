import unittest

from wordsearch.core.models import Position
from wordsearch.engine.selection import line_between, match_selection, read_selection

GRID = [
    ["C", "A", "T", "X"],
    ["O", "X", "X", "X"],
    ["W", "X", "A", "X"],
    ["X", "X", "X", "T"],
]


class LineBetweenTests(unittest.TestCase):
    def test_horizontal_line(self) -> None:
        self.assertEqual(
            line_between(Position(0, 0), Position(2, 0)),
            [Position(0, 0), Position(1, 0), Position(2, 0)],
        )

    def test_reverse_diagonal_line(self) -> None:
        self.assertEqual(
            line_between(Position(3, 3), Position(1, 1)),
            [Position(3, 3), Position(2, 2), Position(1, 1)],
        )

    def test_single_cell(self) -> None:
        self.assertEqual(line_between(Position(1, 2), Position(1, 2)), [Position(1, 2)])

    def test_off_axis_returns_endpoints(self) -> None:
        self.assertEqual(
            line_between(Position(0, 0), Position(2, 1)),
            [Position(0, 0), Position(2, 1)],
        )


class MatchSelectionTests(unittest.TestCase):
    def test_reads_cells_in_order(self) -> None:
        self.assertEqual(read_selection(GRID, [Position(0, 0), Position(0, 1), Position(0, 2)]), "COW")

    def test_forward_match(self) -> None:
        selection = line_between(Position(0, 0), Position(2, 0))
        self.assertEqual(match_selection(GRID, selection, ["cat", "cow"]), "CAT")

    def test_backward_match(self) -> None:
        selection = line_between(Position(3, 3), Position(1, 1))
        self.assertEqual(match_selection(GRID, selection, ["XAT"]), "XAT")

    def test_vertical_match(self) -> None:
        selection = line_between(Position(0, 2), Position(0, 0))
        self.assertEqual(match_selection(GRID, selection, ["COW"]), "COW")

    def test_single_cell_never_matches(self) -> None:
        self.assertIsNone(match_selection(GRID, [Position(0, 0)], ["C"]))

    def test_no_match(self) -> None:
        selection = line_between(Position(0, 0), Position(2, 0))
        self.assertIsNone(match_selection(GRID, selection, ["DOG"]))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
