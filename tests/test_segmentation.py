import unittest

from wordsearch.engine.segmentation import (
    CodePointSegmenter,
    GraphemeSegmenter,
    get_segmenter,
    is_complex_script,
    normalize_language,
    reverse_graphemes,
    segment_word,
)


class SegmentationTests(unittest.TestCase):
    def test_latin_word_splits_into_letters(self) -> None:
        self.assertEqual(segment_word("HELLO", "en"), ["H", "E", "L", "L", "O"])

    def test_combining_mark_stays_with_base_letter(self) -> None:
        self.assertEqual(segment_word("NAI\u0308VE", "fr"), ["N", "A", "I\u0308", "V", "E"])

    def test_tamil_cluster_is_one_grapheme(self) -> None:
        word = "\u0ba4\u0bae\u0bbf\u0bb4\u0bcd"  # Tamil
        self.assertEqual(
            segment_word(word, "ta"),
            ["\u0ba4", "\u0bae\u0bbf", "\u0bb4\u0bcd"],
        )

    def test_segmentation_is_idempotent(self) -> None:
        for word, language in (("CAFE\u0301", "en"), ("नमस्ते", "hi")):
            with self.subTest(word=word):
                self.assertEqual(segment_word(word, language), segment_word(word, language))
                self.assertEqual("".join(segment_word(word, language)), word)

    def test_codepoint_fallback(self) -> None:
        self.assertEqual(CodePointSegmenter("en").segment("CAFE\u0301"), list("CAFE\u0301"))

    def test_get_segmenter_strategies(self) -> None:
        self.assertIsInstance(get_segmenter("en"), GraphemeSegmenter)
        self.assertIsInstance(get_segmenter("en", "codepoint"), CodePointSegmenter)
        with self.assertRaises(ValueError):
            get_segmenter("en", "words")

    def test_normalize_language(self) -> None:
        self.assertEqual(normalize_language("hi-IN"), "hi")
        self.assertEqual(normalize_language("pt_BR"), "pt")
        self.assertEqual(normalize_language("EN"), "en")
        self.assertEqual(normalize_language(""), "en")
        self.assertEqual(normalize_language(None), "en")

    def test_complex_scripts(self) -> None:
        for tag in ("ta", "hi-IN", "bn"):
            self.assertTrue(is_complex_script(tag))
        self.assertFalse(is_complex_script("es"))

    def test_reverse_keeps_clusters_intact(self) -> None:
        self.assertEqual(reverse_graphemes("CAFE\u0301", "en"), "E\u0301FAC")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
