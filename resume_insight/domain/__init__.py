"""Resume Insight Domain - Pure domain logic for document scoring.

This package contains pure functions with no file system or network dependencies.
All I/O is handled by the service, web and CLI layers; this package operates on strings and dicts.
"""

from .ai_detector import (
    PATTERN_RULES,
    Classification,
    ClassificationResult,
    DetectedPattern,
    DetectionThresholds,
    PatternRule,
    PatternSide,
    classify_document,
    classify_probability,
    format_detection_report,
)
from .ats_scorer import (
    ATS_KEYWORDS,
    STANDARD_SECTIONS,
    CategoryResult,
    ScoreReport,
    build_recommendations,
    format_score_report,
    score_formatting,
    score_keywords,
    score_readability,
    score_resume,
    score_structure,
)
from .errors import InputTooLarge, InternalComputeError, InvalidInput, ResumeInsightError
from .public_resume import escape_html, filter_public_info, render_public_resume
from .service_quote import SERVICE_CATALOG, ServiceQuote, estimate_quote, quote_service_request
from .text_signals import SignalSet, count_matches, extract_signals
from .validation import require_fields, validate_document, validate_score_text

__all__ = [
    # Signals
    "SignalSet",
    "extract_signals",
    "count_matches",
    # ATS scorer
    "score_resume",
    "score_formatting",
    "score_keywords",
    "score_structure",
    "score_readability",
    "build_recommendations",
    "format_score_report",
    "CategoryResult",
    "ScoreReport",
    "ATS_KEYWORDS",
    "STANDARD_SECTIONS",
    # AI detector
    "classify_document",
    "classify_probability",
    "format_detection_report",
    "Classification",
    "ClassificationResult",
    "DetectedPattern",
    "DetectionThresholds",
    "PatternRule",
    "PatternSide",
    "PATTERN_RULES",
    # Errors
    "ResumeInsightError",
    "InvalidInput",
    "InputTooLarge",
    "InternalComputeError",
    # Validation
    "validate_score_text",
    "validate_document",
    "require_fields",
    # Public resume
    "escape_html",
    "filter_public_info",
    "render_public_resume",
    # Service quotes
    "SERVICE_CATALOG",
    "ServiceQuote",
    "estimate_quote",
    "quote_service_request",
]
