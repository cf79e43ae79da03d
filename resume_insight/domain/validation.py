"""Input validation run before text enters the scoring core."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Tuple

from .errors import InputTooLarge, InvalidInput

MAX_DOCUMENT_CHARS = 500_000
MAX_DOCUMENT_NAME_CHARS = 255


def validate_score_text(text: Any, max_chars: int = MAX_DOCUMENT_CHARS) -> str:
    """Validate resume text submitted for ATS scoring."""
    return _bounded_string("text", text, max_chars)


def validate_document(
    content: Any,
    name: Any,
    max_chars: int = MAX_DOCUMENT_CHARS,
    max_name_chars: int = MAX_DOCUMENT_NAME_CHARS,
) -> Tuple[str, str]:
    """Validate a document submitted for AI detection.

    Returns the ``(content, name)`` pair unchanged when both are valid.
    """
    return (
        _bounded_string("document_content", content, max_chars),
        _bounded_string("document_name", name, max_name_chars),
    )


def require_fields(payload: Mapping[str, Any], names: Iterable[str]) -> None:
    """Raise :class:`InvalidInput` naming every missing or blank field."""
    missing = [name for name in names if not _present(payload.get(name))]
    if missing:
        raise InvalidInput(
            f"Missing required fields: {', '.join(missing)}",
            {"missing": missing},
        )


def _bounded_string(field: str, value: Any, max_chars: int) -> str:
    if not isinstance(value, str):
        raise InvalidInput(
            f"{field} must be a string",
            {"field": field, "type": type(value).__name__},
        )
    if not value.strip():
        raise InvalidInput(f"{field} must not be empty", {"field": field})
    if len(value) > max_chars:
        raise InputTooLarge(
            f"{field} exceeds {max_chars} characters",
            {"field": field, "max_chars": max_chars, "length": len(value)},
        )
    return value


def _present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True
