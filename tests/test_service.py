"""Tests for the analysis facade."""

from __future__ import annotations

from datetime import date

import pytest

from resume_insight import service
from resume_insight.config import InsightConfig
from resume_insight.domain.ai_detector import Classification, DetectionThresholds
from resume_insight.domain.errors import InputTooLarge, InternalComputeError, InvalidInput


def test_analyze_resume(good_resume) -> None:
    assert service.analyze_resume(good_resume).overall_score == 85


def test_analyze_resume_uses_configured_limit() -> None:
    with pytest.raises(InputTooLarge):
        service.analyze_resume("x" * 11, InsightConfig(max_document_chars=10))


@pytest.mark.parametrize("text", ["", "  ", None, 42])
def test_analyze_resume_rejects_invalid_text(text) -> None:
    with pytest.raises(InvalidInput):
        service.analyze_resume(text)


def test_detect_document_uses_configured_thresholds(furthermore_text) -> None:
    config = InsightConfig(thresholds=DetectionThresholds(ai_generated=0.96, mixed=0.3))
    result = service.detect_document(furthermore_text, "letter.txt", config)
    assert result.ai_probability == pytest.approx(0.95)
    assert result.classification is Classification.MIXED


def test_detect_document_name_limit(neutral_text) -> None:
    with pytest.raises(InputTooLarge):
        service.detect_document(neutral_text, "n" * 11, InsightConfig(max_document_name_chars=10))


def test_quote_request_logs_without_contact_details(caplog) -> None:
    caplog.set_level("INFO", logger="resume_insight.service")
    payload = {
        "client_name": "Jane",
        "client_email": "jane@example.com",
        "client_phone": "+254700000000",
        "service_category": "design",
        "service_type": "logo",
        "description": "Logo",
    }
    quote = service.quote_request(payload, today=date(2024, 1, 1))
    assert quote.estimated_cost == 3000

    text = caplog.text
    assert "service_quote_created" in text
    assert "jane@example.com" not in text
    assert "+254700000000" not in text


def test_unexpected_failure_becomes_internal_error(monkeypatch, good_resume) -> None:
    boom = RuntimeError("boom")

    def _fail(_text):
        raise boom

    monkeypatch.setattr(service, "score_resume", _fail)
    with pytest.raises(InternalComputeError) as exc_info:
        service.analyze_resume(good_resume)
    assert exc_info.value.__cause__ is boom
    assert exc_info.value.details == {"operation": "ats_score"}


def test_domain_errors_pass_through(monkeypatch, neutral_text) -> None:
    def _fail(_text, _thresholds):
        raise InvalidInput("bad")

    monkeypatch.setattr(service, "classify_document", _fail)
    with pytest.raises(InvalidInput):
        service.detect_document(neutral_text, "doc.txt")


def test_decode_document_ignores_invalid_bytes() -> None:
    assert service.decode_document(b"caf\xc3\xa9 \xff ok") == "café  ok"
