"""Rule-based AI-vs-human authorship classifier.

Pattern tallies and simple text statistics are weighed against each other to
produce an AI probability, a confidence score and a categorical label.  The
classifier never asserts certainty: the AI probability is capped below 1.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Pattern, Tuple

from .text_signals import SignalSet, extract_signals


class PatternSide(str, Enum):
    AI = "ai_pattern"
    HUMAN = "human_pattern"


class Classification(str, Enum):
    AI_GENERATED = "AI-Generated"
    MIXED = "Mixed/Uncertain"
    HUMAN_WRITTEN = "Human-Written"


@dataclass(frozen=True)
class PatternRule:
    """One stylistic trait: its regex, the side it supports and a description."""

    pattern_id: str
    side: PatternSide
    regex: Pattern[str]
    description: str


def _rule(pattern_id: str, side: PatternSide, regex: str, description: str) -> PatternRule:
    return PatternRule(pattern_id, side, re.compile(regex, re.IGNORECASE), description)


PATTERN_RULES: Tuple[PatternRule, ...] = (
    _rule(
        "formal_transitions",
        PatternSide.AI,
        r"\b(furthermore|moreover|additionally|consequently|therefore|nonetheless)\b",
        "Formal transitional phrases",
    ),
    _rule(
        "hedging_phrases",
        PatternSide.AI,
        r"\b(it is important to note|it should be noted|it is worth mentioning)\b",
        "Academic hedging language",
    ),
    _rule(
        "summary_markers",
        PatternSide.AI,
        r"\b(in conclusion|to summarize|in summary|overall)\b",
        "Summary and conclusion markers",
    ),
    _rule(
        "quantifying_adjectives",
        PatternSide.AI,
        r"\b(various|numerous|several|multiple)\b",
        "Quantifying adjectives",
    ),
    _rule(
        "formal_vocabulary",
        PatternSide.AI,
        r"\b(utilize|implement|facilitate|optimize)\b",
        "Formal vocabulary choices",
    ),
    _rule(
        "personal_opinion",
        PatternSide.HUMAN,
        r"\b(i think|i believe|in my opinion|personally)\b",
        "Personal opinion expressions",
    ),
    _rule(
        "informal_intensifiers",
        PatternSide.HUMAN,
        r"\b(actually|really|pretty|quite|very)\b",
        "Informal intensifiers",
    ),
    _rule(
        "casual_vocabulary",
        PatternSide.HUMAN,
        r"\b(stuff|things|guy|folks)\b",
        "Casual vocabulary",
    ),
    _rule(
        "repeated_punctuation",
        PatternSide.HUMAN,
        r"[.!?]{2,}",
        "Emotional punctuation",
    ),
    # a word repeated within the next three words
    _rule(
        "repeated_words",
        PatternSide.HUMAN,
        r"\b(\w+)\b(?:\s+\w+){0,2}\s+\1\b",
        "Repetitive phrasing",
    ),
)

PATTERN_WEIGHT = 2

AI_LONG_SENTENCE_WORDS = 20
AI_LONG_SENTENCE_BONUS = 3
AI_LONG_WORD_LENGTH = 5
AI_LONG_WORD_BONUS = 2
HUMAN_SHORT_SENTENCE_WORDS = 15
HUMAN_SHORT_SENTENCE_BONUS = 2
HUMAN_SHORT_WORD_LENGTH = 4.5
HUMAN_SHORT_WORD_BONUS = 1

RECOMMENDATIONS: Dict[Classification, List[str]] = {
    Classification.AI_GENERATED: [
        "Document shows strong AI writing patterns. Consider adding more personal voice and varied sentence structures.",
        "Use more conversational language and avoid overly formal transitions.",
    ],
    Classification.MIXED: [
        "Document shows mixed characteristics. Review for consistency in writing style.",
    ],
    Classification.HUMAN_WRITTEN: [
        "Document appears to be primarily human-written with natural language patterns.",
    ],
}


@dataclass(frozen=True)
class DetectionThresholds:
    """Label bands and probability cap; comparisons are strict ``>``."""

    ai_generated: float = 0.7
    mixed: float = 0.3
    probability_cap: float = 0.95


@dataclass
class DetectedPattern:
    type: PatternSide
    pattern_id: str
    count: int
    description: str

    def to_dict(self) -> Dict[str, object]:
        return {
            "type": self.type.value,
            "pattern_id": self.pattern_id,
            "count": self.count,
            "description": self.description,
        }


@dataclass
class ClassificationResult:
    """Structured result from AI/human classification."""

    ai_probability: float
    human_probability: float
    confidence_score: float
    classification: Classification
    ai_score: int
    human_score: int
    patterns: List[DetectedPattern] = field(default_factory=list)
    summary: str = ""
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "ai_probability": self.ai_probability,
            "human_probability": self.human_probability,
            "confidence_score": self.confidence_score,
            "classification": self.classification.value,
            "ai_score": self.ai_score,
            "human_score": self.human_score,
            "patterns": [p.to_dict() for p in self.patterns],
            "summary": self.summary,
            "recommendations": list(self.recommendations),
        }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def classify_document(
    text: str,
    thresholds: Optional[DetectionThresholds] = None,
) -> ClassificationResult:
    """Classify *text* as AI-generated, mixed or human-written."""
    thresholds = thresholds or DetectionThresholds()
    signals = extract_signals(text, ((rule.pattern_id, rule.regex) for rule in PATTERN_RULES))

    patterns = detected_patterns(signals)
    ai_score, human_score = _tally(patterns, signals)

    total = (ai_score + human_score) or 1
    ai_probability = min(ai_score / total, thresholds.probability_cap)
    label = classify_probability(ai_probability, thresholds)

    return ClassificationResult(
        ai_probability=ai_probability,
        human_probability=1 - ai_probability,
        confidence_score=abs(ai_probability - 0.5) * 2,
        classification=label,
        ai_score=ai_score,
        human_score=human_score,
        patterns=patterns,
        summary=_summarize(patterns, signals),
        recommendations=list(RECOMMENDATIONS[label]),
    )


def classify_probability(ai_probability: float, thresholds: Optional[DetectionThresholds] = None) -> Classification:
    thresholds = thresholds or DetectionThresholds()
    if ai_probability > thresholds.ai_generated:
        return Classification.AI_GENERATED
    if ai_probability > thresholds.mixed:
        return Classification.MIXED
    return Classification.HUMAN_WRITTEN


def detected_patterns(signals: SignalSet) -> List[DetectedPattern]:
    """Turn non-zero pattern counts into entries, in rule-table order."""
    found: List[DetectedPattern] = []
    for rule in PATTERN_RULES:
        count = signals.pattern_counts.get(rule.pattern_id, 0)
        if count:
            found.append(DetectedPattern(rule.side, rule.pattern_id, count, rule.description))
    return found


def format_detection_report(result: ClassificationResult, document_name: str = "") -> str:
    """Render a :class:`ClassificationResult` as a human-readable report."""
    title = f"## AI Detection: {result.classification.value}"
    if document_name:
        title += f" -- {document_name}"
    lines = [
        title,
        "",
        f"- AI probability: {result.ai_probability:.0%}",
        f"- Human probability: {result.human_probability:.0%}",
        f"- Confidence: {result.confidence_score:.0%}",
        "",
        result.summary,
    ]

    if result.patterns:
        lines.append("")
        lines.append("### Detected Patterns")
        for p in result.patterns:
            side = "AI" if p.type is PatternSide.AI else "Human"
            lines.append(f"- [{side}] {p.description} (x{p.count})")

    lines.append("")
    lines.append("### Recommendations")
    for i, rec in enumerate(result.recommendations, 1):
        lines.append(f"{i}. {rec}")

    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _tally(patterns: List[DetectedPattern], signals: SignalSet) -> Tuple[int, int]:
    ai_score = sum(p.count * PATTERN_WEIGHT for p in patterns if p.type is PatternSide.AI)
    human_score = sum(p.count * PATTERN_WEIGHT for p in patterns if p.type is PatternSide.HUMAN)

    if signals.avg_words_per_sentence > AI_LONG_SENTENCE_WORDS:
        ai_score += AI_LONG_SENTENCE_BONUS
    if signals.avg_word_length > AI_LONG_WORD_LENGTH:
        ai_score += AI_LONG_WORD_BONUS
    if signals.avg_words_per_sentence < HUMAN_SHORT_SENTENCE_WORDS:
        human_score += HUMAN_SHORT_SENTENCE_BONUS
    if signals.avg_word_length < HUMAN_SHORT_WORD_LENGTH:
        human_score += HUMAN_SHORT_WORD_BONUS

    return ai_score, human_score


def _summarize(patterns: List[DetectedPattern], signals: SignalSet) -> str:
    return (
        f"Document analyzed with {len(patterns)} patterns detected. "
        f"Text contains {signals.word_count} words across {signals.sentence_count} sentences "
        f"with average sentence length of {signals.avg_words_per_sentence:.1f} words."
    )
