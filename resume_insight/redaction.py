"""Log redaction helpers for sensitive user-provided content."""

from __future__ import annotations

import re
from typing import Any, Dict, Mapping

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_RE = re.compile(r"(?:\+?\d[\d\s().-]{7,}\d)")
SECRET_RE = re.compile(r"\b(?:(?:sk|rk)-|re_)[A-Za-z0-9_-]{8,}\b")

SENSITIVE_KEYS = frozenset({"email", "phone", "password", "token", "personal_info"})
REDACTED = "[REDACTED]"


def redact_text(value: str, max_length: int = 200) -> str:
    """Mask emails, phone numbers and API keys, then truncate."""
    redacted = EMAIL_RE.sub("[REDACTED_EMAIL]", value or "")
    redacted = SECRET_RE.sub("[REDACTED_KEY]", redacted)
    redacted = PHONE_RE.sub("[REDACTED_PHONE]", redacted)
    if len(redacted) > max_length:
        return f"{redacted[:max_length]}..."
    return redacted


def redact_for_log(value: Any) -> Any:
    if isinstance(value, str):
        return redact_text(value)
    if isinstance(value, dict):
        return redact_context(value)
    if isinstance(value, list):
        return [redact_for_log(item) for item in value]
    if isinstance(value, tuple):
        return tuple(redact_for_log(item) for item in value)
    return value


def redact_context(context: Mapping[str, Any]) -> Dict[str, Any]:
    """Replace values of sensitive keys wholesale and scrub everything else."""
    return {
        str(key): REDACTED if str(key).lower() in SENSITIVE_KEYS else redact_for_log(value)
        for key, value in context.items()
    }
