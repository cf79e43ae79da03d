"""Analysis facade used by the web API and the CLI.

Validates input, runs the pure domain core and logs one line per call.
Domain errors propagate untouched; anything else is a defect and is
re-raised as :class:`InternalComputeError`.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Mapping, Optional, TypeVar

from .config import InsightConfig
from .domain.ai_detector import ClassificationResult, classify_document
from .domain.ats_scorer import ScoreReport, score_resume
from .domain.errors import InternalComputeError, ResumeInsightError
from .domain.service_quote import ServiceQuote, quote_service_request
from .domain.validation import validate_document, validate_score_text
from .observability import log_secure

logger = logging.getLogger("resume_insight.service")

T = TypeVar("T")


def analyze_resume(text: Any, config: Optional[InsightConfig] = None) -> ScoreReport:
    """Validate and score resume *text* for ATS compatibility."""
    config = config or InsightConfig()
    text = validate_score_text(text, config.max_document_chars)
    report = _run("ats_score", score_resume, text)
    log_secure(
        logger,
        "info",
        "ats_score_completed",
        {
            "overall_score": report.overall_score,
            "characters": len(text),
        },
        development=config.is_development,
    )
    return report


def detect_document(content: Any, name: Any, config: Optional[InsightConfig] = None) -> ClassificationResult:
    """Validate a named document and classify its authorship."""
    config = config or InsightConfig()
    content, name = validate_document(
        content,
        name,
        max_chars=config.max_document_chars,
        max_name_chars=config.max_document_name_chars,
    )
    result = _run("ai_detection", classify_document, content, config.thresholds)
    log_secure(
        logger,
        "info",
        "ai_detection_completed",
        {
            "document_name": name,
            "classification": result.classification.value,
            "ai_probability": round(result.ai_probability, 4),
            "patterns": len(result.patterns),
        },
        development=config.is_development,
    )
    return result


def quote_request(
    payload: Mapping[str, Any],
    config: Optional[InsightConfig] = None,
    today: Optional[date] = None,
) -> ServiceQuote:
    """Validate a service request and estimate its quote."""
    config = config or InsightConfig()
    quote = _run("service_quote", quote_service_request, payload, today)
    log_secure(
        logger,
        "info",
        "service_quote_created",
        {
            "email": payload.get("client_email"),
            "phone": payload.get("client_phone"),
            "service": f"{quote.service_category}/{quote.service_type}",
            "priority": quote.priority,
        },
        development=config.is_development,
    )
    return quote


def decode_document(content: bytes) -> str:
    """Decode uploaded bytes as text; no PDF/DOCX extraction is attempted."""
    return content.decode("utf-8", errors="ignore")


def _run(operation: str, func: Callable[..., T], *args: Any) -> T:
    try:
        return func(*args)
    except ResumeInsightError:
        raise
    except Exception as exc:
        logger.exception("%s failed unexpectedly", operation)
        raise InternalComputeError(
            f"{operation} failed unexpectedly",
            {"operation": operation},
        ) from exc
