"""Pure domain logic for ATS (Applicant Tracking System) resume scoring.

All functions operate on content strings -- no file I/O.  Each category
scorer is independent and returns a bounded score plus feedback lines;
:func:`score_resume` combines them into a :class:`ScoreReport`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List

from .text_signals import ensure_text, extract_signals

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

ATS_KEYWORDS: List[str] = [
    "experience",
    "skills",
    "project",
    "team",
    "management",
    "development",
    "analysis",
]

STANDARD_SECTIONS: List[str] = ["experience", "education", "skills", "summary"]

FORMAT_MARKERS: List[str] = ["pdf", "docx"]

CATEGORY_ORDER: List[str] = ["formatting", "keywords", "structure", "readability"]

FORMATTING_BASE = 85
FORMATTING_MISSING_FORMAT_PENALTY = 10

KEYWORDS_BASE = 50
KEYWORDS_PER_MATCH = 8
KEYWORDS_CAP = 95
KEYWORDS_GOOD_THRESHOLD = 70

STRUCTURE_BASE = 90
STRUCTURE_MIN_SECTIONS = 3
STRUCTURE_MISSING_PENALTY = 15

READABILITY_BASE = 75
READABILITY_MAX_SENTENCE_WORDS = 25
READABILITY_LONG_SENTENCE_PENALTY = 15
READABILITY_MIN_WORDS = 200
READABILITY_SHORT_PENALTY = 10
READABILITY_MAX_WORDS = 800
READABILITY_LONG_PENALTY = 5


@dataclass
class CategoryResult:
    """Score (0-100) and ordered feedback for one category."""

    score: int
    feedback: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {"score": self.score, "feedback": list(self.feedback)}


@dataclass
class ScoreReport:
    """Structured result from ATS scoring."""

    overall_score: int
    categories: Dict[str, CategoryResult]
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "overall_score": self.overall_score,
            "categories": {name: result.to_dict() for name, result in self.categories.items()},
            "recommendations": list(self.recommendations),
        }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def score_resume(text: str) -> ScoreReport:
    """Score resume *text* for ATS compatibility.

    Returns a :class:`ScoreReport` with the four category breakdowns, an
    unweighted overall score and recommendations.
    """
    text = ensure_text(text)

    categories = {
        "formatting": score_formatting(text),
        "keywords": score_keywords(text),
        "structure": score_structure(text),
        "readability": score_readability(text),
    }
    overall = _round_half_up(sum(c.score for c in categories.values()) / len(categories))

    return ScoreReport(
        overall_score=_clamp(overall),
        categories=categories,
        recommendations=build_recommendations(categories, overall),
    )


def score_formatting(text: str) -> CategoryResult:
    """Heuristic format check over decoded text.

    The real file type is not recoverable from text, so this only looks for
    ``pdf``/``docx`` mentions in the content itself.
    """
    score = FORMATTING_BASE
    feedback: List[str] = []
    lowered = ensure_text(text).lower()

    if any(marker in lowered for marker in FORMAT_MARKERS):
        feedback.append("Standard document format referenced")
    else:
        score -= FORMATTING_MISSING_FORMAT_PENALTY
        feedback.append("Use a standard file format (PDF or DOCX) for best ATS compatibility")

    return CategoryResult(score=_clamp(score), feedback=feedback)


def score_keywords(text: str) -> CategoryResult:
    lowered = ensure_text(text).lower()
    matched = [kw for kw in ATS_KEYWORDS if kw in lowered]
    score = min(KEYWORDS_CAP, KEYWORDS_BASE + KEYWORDS_PER_MATCH * len(matched))

    feedback = [f"Found {len(matched)} relevant keywords"]
    if score < KEYWORDS_GOOD_THRESHOLD:
        feedback.append("Consider adding more industry-specific keywords")
    else:
        feedback.append("Good keyword coverage for ATS systems")

    return CategoryResult(score=_clamp(score), feedback=feedback)


def score_structure(text: str) -> CategoryResult:
    score = STRUCTURE_BASE
    lowered = ensure_text(text).lower()
    present = [s for s in STANDARD_SECTIONS if s in lowered]

    if len(present) < STRUCTURE_MIN_SECTIONS:
        score -= STRUCTURE_MISSING_PENALTY
        missing = [s for s in STANDARD_SECTIONS if s not in present]
        feedback = [f"Missing standard sections: {', '.join(missing)}"]
    else:
        feedback = [f"Clear section headers found ({len(present)} of {len(STANDARD_SECTIONS)})"]

    return CategoryResult(score=_clamp(score), feedback=feedback)


def score_readability(text: str) -> CategoryResult:
    """Penalties are cumulative; the result is clamped to [0, 100]."""
    signals = extract_signals(text)
    score = READABILITY_BASE
    feedback: List[str] = []

    if signals.avg_words_per_sentence > READABILITY_MAX_SENTENCE_WORDS:
        score -= READABILITY_LONG_SENTENCE_PENALTY
        feedback.append("Some sentences are too long -- aim for under 25 words per sentence")
    else:
        feedback.append("Good sentence length")

    if signals.word_count < READABILITY_MIN_WORDS:
        score -= READABILITY_SHORT_PENALTY
        feedback.append(f"Resume is too brief ({signals.word_count} words) -- add more detail")
    elif signals.word_count > READABILITY_MAX_WORDS:
        score -= READABILITY_LONG_PENALTY
        feedback.append(f"Resume is too long ({signals.word_count} words) -- consider condensing")
    else:
        feedback.append("Appropriate resume length")

    return CategoryResult(score=_clamp(score), feedback=feedback)


def build_recommendations(categories: Dict[str, CategoryResult], overall_score: int) -> List[str]:
    """Map category scores to an ordered list of improvement suggestions."""
    recommendations: List[str] = []

    if categories["keywords"].score < KEYWORDS_GOOD_THRESHOLD:
        recommendations.append("Add more industry-specific keywords to improve ATS matching")
    if categories["readability"].score < READABILITY_BASE:
        recommendations.append("Shorten sentences and bullet points to 1-2 lines for better readability")
    if categories["structure"].score < STRUCTURE_BASE:
        recommendations.append("Add the missing standard sections: experience, education, skills, summary")
    if categories["formatting"].score < FORMATTING_BASE:
        recommendations.append("Submit your resume as a PDF or DOCX file")
    if overall_score < 80:
        recommendations.append("Include more quantified achievements with specific numbers")

    if not recommendations:
        recommendations.append("Your resume is well optimized for ATS systems -- tailor it for each application")
    return recommendations


# ---------------------------------------------------------------------------
# Formatting report (pure string output)
# ---------------------------------------------------------------------------


def format_score_report(report: ScoreReport) -> str:
    """Render a :class:`ScoreReport` as a human-readable Markdown report."""
    grade = _score_to_grade(report.overall_score)
    lines = [
        f"## ATS Score: {report.overall_score}/100 {grade}",
        _score_bar(report.overall_score),
        "",
        "| Category     | Score |",
        "|-------------|-------|",
    ]
    for name in CATEGORY_ORDER:
        result = report.categories[name]
        lines.append(f"| {name.capitalize():<12} | {result.score:3d}   |")

    lines.append("")
    lines.append("### Feedback")
    for name in CATEGORY_ORDER:
        for line in report.categories[name].feedback:
            lines.append(f"- **{name.capitalize()}**: {line}")

    if report.recommendations:
        lines.append("")
        lines.append("### Recommendations")
        for i, rec in enumerate(report.recommendations, 1):
            lines.append(f"{i}. {rec}")

    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _clamp(score: float, low: int = 0, high: int = 100) -> int:
    return int(max(low, min(high, score)))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _score_to_grade(score: int) -> str:
    if score >= 80:
        return "Excellent"
    elif score >= 60:
        return "Good"
    else:
        return "Needs Work"


def _score_bar(score: int, width: int = 20) -> str:
    filled = round(score / 100 * width)
    return f"[{'=' * filled}{' ' * (width - filled)}]"
