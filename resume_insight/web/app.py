"""FastAPI app entrypoint for Resume Insight web APIs."""

from __future__ import annotations

import logging
import os
from time import perf_counter
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from ..config import InsightConfig, load_config
from ..domain.errors import ResumeInsightError
from ..observability import setup_logging
from .api.v1.router import api_v1_router
from .errors import APIError, api_error_handler, domain_error_handler, validation_error_handler

logger = logging.getLogger("resume_insight.web.api")


def create_app(config: Optional[InsightConfig] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if config is None:
        config = load_config(os.getenv("RESUME_INSIGHT_CONFIG") or None)
    setup_logging(config.log_level)

    app = FastAPI(title="Resume Insight API", version="0.1.0")
    app.state.config = config
    app.include_router(api_v1_router)

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        start = perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            _log_request(request, status, start, config.environment)

    @app.get("/healthz", tags=["system"])
    async def healthz() -> dict:
        return {"status": "ok"}

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(ResumeInsightError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    return app


def _log_request(request: Request, status: int, start: float, environment: str) -> None:
    logger.info(
        "api_request method=%s path=%s status=%s duration_ms=%.2f env=%s",
        request.method,
        request.url.path,
        status,
        (perf_counter() - start) * 1000,
        environment,
    )


app = create_app()


def main() -> None:
    """Run development API server."""
    import uvicorn

    uvicorn.run("resume_insight.web.app:app", host="127.0.0.1", port=8000)
