"""AI-content detection endpoint for Web API v1."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from .....config import InsightConfig
from .....service import detect_document
from ..deps import get_config

router = APIRouter(prefix="/ai-detection", tags=["ai-detection"])


class DetectionRequest(BaseModel):
    document_content: str
    document_name: str


class DetectedPatternResponse(BaseModel):
    type: str
    pattern_id: str
    count: int
    description: str


class DetectionResponse(BaseModel):
    document_name: str
    ai_probability: float
    human_probability: float
    confidence_score: float
    classification: str
    patterns: List[DetectedPatternResponse]
    summary: str
    recommendations: List[str]


@router.post("", response_model=DetectionResponse)
def detect(
    request: DetectionRequest,
    config: InsightConfig = Depends(get_config),
) -> DetectionResponse:
    result = detect_document(request.document_content, request.document_name, config)
    return DetectionResponse(
        document_name=request.document_name,
        ai_probability=result.ai_probability,
        human_probability=result.human_probability,
        confidence_score=result.confidence_score,
        classification=result.classification.value,
        patterns=[DetectedPatternResponse(**p.to_dict()) for p in result.patterns],
        summary=result.summary,
        recommendations=result.recommendations,
    )
