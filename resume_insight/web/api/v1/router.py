"""Top-level v1 API router."""

from __future__ import annotations

from fastapi import APIRouter

from .endpoints.detection import router as detection_router
from .endpoints.quotes import router as quotes_router
from .endpoints.scoring import router as scoring_router

api_v1_router = APIRouter(prefix="/api/v1")
api_v1_router.include_router(scoring_router)
api_v1_router.include_router(detection_router)
api_v1_router.include_router(quotes_router)
