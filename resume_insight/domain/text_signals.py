"""Pure text signal extraction shared by the ATS scorer and the AI detector.

All functions operate on content strings -- no file I/O.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, Pattern, Tuple

from .errors import InvalidInput

_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")


@dataclass(frozen=True)
class SignalSet:
    """Numeric features extracted from one document."""

    word_count: int = 0
    sentence_count: int = 0
    avg_words_per_sentence: float = 0.0
    avg_word_length: float = 0.0
    pattern_counts: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, object]:
        return {
            "word_count": self.word_count,
            "sentence_count": self.sentence_count,
            "avg_words_per_sentence": self.avg_words_per_sentence,
            "avg_word_length": self.avg_word_length,
            "pattern_counts": dict(self.pattern_counts),
        }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def ensure_text(text: object) -> str:
    """Return *text* unchanged, raising :class:`InvalidInput` for non-strings."""
    if not isinstance(text, str):
        raise InvalidInput(
            f"Expected text as a string, got {type(text).__name__}",
            {"type": type(text).__name__},
        )
    return text


def extract_signals(
    text: str,
    patterns: Iterable[Tuple[str, Pattern[str]]] = (),
) -> SignalSet:
    """Extract word/sentence statistics and optional pattern counts.

    *patterns* is an ordered iterable of ``(pattern_id, compiled_regex)``;
    only non-zero counts are kept, in definition order.
    """
    text = ensure_text(text)

    words = word_count(text)
    sentences = sentence_count(text)
    avg_wps = words / sentences if sentences else 0.0
    avg_len = len(_WHITESPACE_RE.sub("", text)) / words if words else 0.0

    return SignalSet(
        word_count=words,
        sentence_count=sentences,
        avg_words_per_sentence=avg_wps,
        avg_word_length=avg_len,
        pattern_counts=count_patterns(patterns, text),
    )


def word_count(text: str) -> int:
    """Count non-empty whitespace-separated tokens."""
    return len(text.split())


def sentence_count(text: str) -> int:
    """Count segments between ``[.!?]+`` runs.

    Terminal punctuation leaves a trailing empty segment that is counted.
    Blank text has no sentences at all.
    """
    if not text.strip():
        return 0
    return len(_SENTENCE_SPLIT_RE.split(text))


def count_matches(pattern: Pattern[str], text: str) -> int:
    """Count non-overlapping matches of *pattern* in lower-cased *text*."""
    return sum(1 for _ in pattern.finditer(text.lower()))


def count_patterns(patterns: Iterable[Tuple[str, Pattern[str]]], text: str) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for pattern_id, pattern in patterns:
        n = count_matches(pattern, text)
        if n:
            counts[pattern_id] = n
    return counts
