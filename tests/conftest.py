"""Global pytest fixtures for deterministic test environment."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _isolate_runtime_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear local runtime env that can leak into tests on developer machines."""
    for key in (
        "RESUME_INSIGHT_CONFIG",
        "RESUME_INSIGHT_MAX_DOCUMENT_CHARS",
        "RESUME_INSIGHT_MAX_DOCUMENT_NAME_CHARS",
        "RESUME_INSIGHT_MAX_UPLOAD_BYTES",
        "RESUME_INSIGHT_LOG_LEVEL",
        "RESUME_INSIGHT_ENVIRONMENT",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers installed by setup_logging so they never outlive captured streams."""
    logger = logging.getLogger("resume_insight")
    before = list(logger.handlers)
    level = logger.level
    yield
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if handler not in before:
            logger.removeHandler(handler)


@pytest.fixture
def neutral_text() -> str:
    """17 words, one sentence, average word length ~4.8, no pattern hits."""
    return "Their team gathered early on Monday to plan the garden layout and choose seeds for spring planting"


@pytest.fixture
def furthermore_text() -> str:
    """Neutral statistics plus a single formal transition."""
    return "Furthermore their team met early on Monday to plan the garden layout and choose seeds for spring planting"


@pytest.fixture
def good_resume() -> str:
    """A resume that triggers no ATS penalty (269 words, short sentences)."""
    head = (
        "Jane Smith. Resume available as PDF. "
        "Summary. Software engineer leading a platform team. "
        "Experience. Led project delivery for payments development. "
        "Education. Computer science degree. "
        "Skills. Python and cloud infrastructure. "
    )
    filler = " ".join(f"Delivered release {i} on schedule with careful testing." for i in range(30))
    return head + filler
