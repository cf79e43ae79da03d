"""ATS scoring endpoints for Web API v1."""

from __future__ import annotations

from typing import Dict, List

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from .....config import InsightConfig
from .....domain.ats_scorer import ScoreReport
from .....service import analyze_resume
from ..deps import get_config
from ..upload import read_upload_text

router = APIRouter(prefix="/ats-score", tags=["ats-score"])


class ScoreRequest(BaseModel):
    text: str


class CategoryResponse(BaseModel):
    score: int
    feedback: List[str]


class ScoreResponse(BaseModel):
    overall_score: int
    categories: Dict[str, CategoryResponse]
    recommendations: List[str]


def _to_response(report: ScoreReport) -> ScoreResponse:
    return ScoreResponse(
        overall_score=report.overall_score,
        categories={
            name: CategoryResponse(score=result.score, feedback=result.feedback)
            for name, result in report.categories.items()
        },
        recommendations=report.recommendations,
    )


@router.post("", response_model=ScoreResponse)
def score_text(
    request: ScoreRequest,
    config: InsightConfig = Depends(get_config),
) -> ScoreResponse:
    return _to_response(analyze_resume(request.text, config))


@router.post("/upload", response_model=ScoreResponse)
async def score_upload(
    file: UploadFile = File(...),
    config: InsightConfig = Depends(get_config),
) -> ScoreResponse:
    text = await read_upload_text(file, config.max_upload_bytes)
    return _to_response(await run_in_threadpool(analyze_resume, text, config))
