import io
import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from main import main, parse_words_file


class MainTests(unittest.TestCase):
    def test_parse_words_file_skips_comments(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "words.txt"
            path.write_text("# animals\nCAT:Pet\n\nDOG\n", encoding="utf-8")
            self.assertEqual(parse_words_file(path), ["CAT:Pet", "DOG"])

    def test_user_words_written_to_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "puzzle.json"
            main([
                "--words", "CAT:Pet", "DOG",
                "--size", "6",
                "--seed", "1",
                "--store-dir", str(Path(tmpdir) / "store"),
                "--output", str(output),
            ])
            payload = json.loads(output.read_text(encoding="utf-8"))
            puzzle = payload["puzzles"][0]
            self.assertEqual(len(puzzle["grid"]), 6)
            self.assertEqual(
                sorted(word["text"] for word in puzzle["placed_words"]), ["CAT", "DOG"]
            )
            self.assertEqual(payload["game"]["theme"], "custom")

    def test_theme_without_api_key_exits_cleanly(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with patch.dict(os.environ, {}, clear=True):
                with patch("sys.stderr", new_callable=io.StringIO) as stderr:
                    with self.assertRaises(SystemExit) as ctx:
                        main(["--theme", "animals", "--store-dir", tmpdir])
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("API_KEY", stderr.getvalue())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
