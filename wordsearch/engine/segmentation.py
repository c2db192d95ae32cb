"""Grapheme segmentation keyed by language tag.

Word lengths, grid cells and filler characters are all measured in
user-perceived characters (extended grapheme clusters), not code points.
Scripts such as Tamil, Hindi and Bengali combine a consonant with vowel
signs or viramas, so ``len(word)`` overcounts the cells a word needs.

Two strategies are available:

- ``"grapheme"`` (default): Unicode extended grapheme clusters via the
  ``regex`` module's ``\\X`` pattern.
- ``"codepoint"``: a plain split into code points. This is the fallback for
  callers that need to match a runtime without grapheme support.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Protocol

import regex

from ..core.constants import COMPLEX_SCRIPT_LANGUAGES

GRAPHEME_RE = regex.compile(r"\X")


class Segmenter(Protocol):
    def segment(self, word: str) -> List[str]:
        ...


class GraphemeSegmenter:
    """Split text into extended grapheme clusters."""

    def __init__(self, language: str = "en") -> None:
        self.language = normalize_language(language)

    def segment(self, word: str) -> List[str]:
        return GRAPHEME_RE.findall(word)


class CodePointSegmenter:
    """Split text into individual code points."""

    def __init__(self, language: str = "en") -> None:
        self.language = normalize_language(language)

    def segment(self, word: str) -> List[str]:
        return list(word)


SEGMENTATION_STRATEGIES: Dict[str, type] = {
    "grapheme": GraphemeSegmenter,
    "codepoint": CodePointSegmenter,
}


def normalize_language(tag: Optional[str]) -> str:
    """Return the lowercase primary subtag of a BCP 47 tag (``hi-IN`` -> ``hi``)."""

    if not tag:
        return "en"
    primary = tag.replace("_", "-").split("-", 1)[0].strip().lower()
    return primary or "en"


def is_complex_script(language: Optional[str]) -> bool:
    return normalize_language(language) in COMPLEX_SCRIPT_LANGUAGES


def get_segmenter(language: str, strategy: str = "grapheme") -> Segmenter:
    try:
        factory = SEGMENTATION_STRATEGIES[strategy]
    except KeyError:
        raise ValueError(
            f"Unknown segmentation strategy '{strategy}' "
            f"(known: {sorted(SEGMENTATION_STRATEGIES)})"
        ) from None
    return factory(language)


def segment_word(word: str, language: str, segmenter: Optional[Segmenter] = None) -> List[str]:
    """Return the ordered graphemes of ``word``."""

    segmenter = segmenter or get_segmenter(language)
    return segmenter.segment(word)


def reverse_graphemes(text: str, language: str, segmenter: Optional[Segmenter] = None) -> str:
    return "".join(reversed(segment_word(text, language, segmenter)))
