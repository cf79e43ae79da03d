"""Web API v1 contract tests."""

from __future__ import annotations

import inspect

import pytest
from fastapi.testclient import TestClient

from resume_insight import service
from resume_insight.config import InsightConfig
from resume_insight.web.app import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(InsightConfig(max_document_chars=5000, max_upload_bytes=4096)))


def _quote_payload(**overrides) -> dict:
    payload = {
        "client_name": "Jane",
        "client_email": "jane@example.com",
        "client_phone": "+254700000000",
        "service_category": "design",
        "service_type": "logo",
        "description": "Logo for a bakery",
    }
    payload.update(overrides)
    return payload


def test_healthz(client: TestClient) -> None:
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_ats_score(client: TestClient, good_resume: str) -> None:
    response = client.post("/api/v1/ats-score", json={"text": good_resume})
    assert response.status_code == 200
    body = response.json()
    assert body["overall_score"] == 85
    assert set(body["categories"]) == {"formatting", "keywords", "structure", "readability"}
    assert body["categories"]["keywords"]["score"] == 90
    assert len(body["recommendations"]) == 1


def test_ats_score_empty_text(client: TestClient) -> None:
    response = client.post("/api/v1/ats-score", json={"text": "  "})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_INPUT"


def test_ats_score_wrong_type(client: TestClient) -> None:
    response = client.post("/api/v1/ats-score", json={"text": 123})
    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "BAD_REQUEST"
    assert error["details"]["errors"]


def test_ats_score_too_large(client: TestClient) -> None:
    response = client.post("/api/v1/ats-score", json={"text": "x" * 5001})
    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "INPUT_TOO_LARGE"
    assert error["details"]["max_chars"] == 5000


def test_ats_score_upload(client: TestClient) -> None:
    files = {"file": ("resume.txt", b"Experience. Education. Skills. Team project.", "text/plain")}
    response = client.post("/api/v1/ats-score/upload", files=files)
    assert response.status_code == 200
    assert response.json()["categories"]["structure"]["score"] == 90


def test_ats_score_upload_too_large(client: TestClient) -> None:
    files = {"file": ("resume.txt", b"a" * 5000, "text/plain")}
    response = client.post("/api/v1/ats-score/upload", files=files)
    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "INPUT_TOO_LARGE"
    assert error["details"] == {"max_upload_bytes": 4096}


def test_ai_detection(client: TestClient, furthermore_text: str) -> None:
    response = client.post(
        "/api/v1/ai-detection",
        json={"document_content": furthermore_text, "document_name": "letter.txt"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["document_name"] == "letter.txt"
    assert body["classification"] == "AI-Generated"
    assert body["ai_probability"] == pytest.approx(0.95)
    assert body["human_probability"] == pytest.approx(0.05)
    assert body["patterns"] == [
        {
            "type": "ai_pattern",
            "pattern_id": "formal_transitions",
            "count": 1,
            "description": "Formal transitional phrases",
        }
    ]


def test_ai_detection_missing_name(client: TestClient, neutral_text: str) -> None:
    response = client.post("/api/v1/ai-detection", json={"document_content": neutral_text})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "BAD_REQUEST"


def test_ai_detection_empty_content(client: TestClient) -> None:
    response = client.post("/api/v1/ai-detection", json={"document_content": "", "document_name": "a.txt"})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_INPUT"


def test_ai_detection_name_too_long(client: TestClient, neutral_text: str) -> None:
    response = client.post(
        "/api/v1/ai-detection",
        json={"document_content": neutral_text, "document_name": "n" * 256},
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INPUT_TOO_LARGE"


def test_service_quote(client: TestClient) -> None:
    response = client.post("/api/v1/service-quotes", json=_quote_payload(urgency="urgent"))
    assert response.status_code == 200
    body = response.json()
    assert body["estimated_cost"] == 3000
    assert body["estimated_days"] == 5
    assert body["priority"] == "high"


def test_service_quote_missing_fields(client: TestClient) -> None:
    payload = _quote_payload()
    del payload["client_phone"]
    payload["description"] = ""
    response = client.post("/api/v1/service-quotes", json=payload)
    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "INVALID_INPUT"
    assert error["details"]["missing"] == ["client_phone", "description"]


def test_internal_error_hides_details(client: TestClient, good_resume: str, monkeypatch) -> None:
    def _fail(_text):
        raise RuntimeError("secret internals")

    monkeypatch.setattr(service, "score_resume", _fail)
    response = client.post("/api/v1/ats-score", json={"text": good_resume})
    assert response.status_code == 500
    assert response.json() == {
        "error": {"code": "INTERNAL_ERROR", "message": "Internal server error", "details": {}}
    }


def test_requests_are_logged(client: TestClient, caplog) -> None:
    caplog.set_level("INFO", logger="resume_insight.web.api")
    client.get("/healthz")
    assert "api_request method=GET path=/healthz status=200" in caplog.text


def test_detection_log_never_contains_content(client: TestClient, caplog) -> None:
    caplog.set_level("INFO", logger="resume_insight.service")
    content = "Please reach me at jane@example.com. Furthermore the garden needs seeds."
    client.post("/api/v1/ai-detection", json={"document_content": content, "document_name": "jane@example.com.txt"})
    assert "ai_detection_completed" in caplog.text
    assert "jane@example.com" not in caplog.text


def test_analysis_handlers_run_in_threadpool() -> None:
    from resume_insight.web.api.v1.endpoints import detection, quotes, scoring

    for handler in (scoring.score_text, detection.detect, quotes.create_quote):
        assert not inspect.iscoroutinefunction(handler)


def test_large_detection_request(client: TestClient, neutral_text: str) -> None:
    content = (neutral_text + ". ") * 40
    response = client.post("/api/v1/ai-detection", json={"document_content": content[:5000], "document_name": "big.txt"})
    assert response.status_code == 200
    assert response.json()["classification"] == "Human-Written"
