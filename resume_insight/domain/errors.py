"""Error taxonomy shared by the scoring and detection pipelines."""

from __future__ import annotations

from typing import Any, Dict, Optional


class ResumeInsightError(Exception):
    """Base class for all domain errors raised by resume_insight."""

    code = "ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidInput(ResumeInsightError):
    """Input has the wrong type or a required field is empty."""

    code = "INVALID_INPUT"


class InputTooLarge(ResumeInsightError):
    """Input exceeds the configured size cap."""

    code = "INPUT_TOO_LARGE"


class InternalComputeError(ResumeInsightError):
    """Unexpected failure inside an extractor or scorer (a defect, not recoverable)."""

    code = "INTERNAL_ERROR"
