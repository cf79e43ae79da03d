"""API error helpers and exception handlers."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..domain.errors import InternalComputeError, ResumeInsightError


class APIError(Exception):
    """Application-level API error with status/code mapping."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return _envelope(self.code, self.message, self.details)


async def api_error_handler(_: Request, exc: APIError) -> JSONResponse:
    """Render contract-compliant error response."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def domain_error_handler(_: Request, exc: ResumeInsightError) -> JSONResponse:
    """Map domain errors: validation failures are 400, compute defects 500."""
    if isinstance(exc, InternalComputeError):
        return JSONResponse(
            status_code=500,
            content=_envelope(exc.code, "Internal server error", {}),
        )
    return JSONResponse(status_code=400, content=_envelope(exc.code, exc.message, exc.details))


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Normalize FastAPI validation errors to API contract shape."""
    return JSONResponse(
        status_code=400,
        content=_envelope("BAD_REQUEST", "Invalid request payload", {"errors": _jsonable_errors(exc)}),
    )


def _envelope(code: str, message: str, details: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details,
        }
    }


def _jsonable_errors(exc: RequestValidationError) -> list:
    # pydantic may put exception objects under "ctx"
    return [{k: v for k, v in err.items() if k != "ctx"} for err in exc.errors()]
