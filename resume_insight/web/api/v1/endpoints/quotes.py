"""Service-request quote endpoint for Web API v1."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from .....config import InsightConfig
from .....service import quote_request
from ..deps import get_config

router = APIRouter(prefix="/service-quotes", tags=["service-quotes"])


class QuoteRequest(BaseModel):
    # required fields are checked by the domain so the error lists all of them
    client_name: Optional[str] = None
    client_email: Optional[str] = None
    client_phone: Optional[str] = None
    service_category: Optional[str] = None
    service_type: Optional[str] = None
    description: Optional[str] = None
    urgency: str = Field(default="normal")


class QuoteResponse(BaseModel):
    service_category: str
    service_type: str
    estimated_cost: Optional[int]
    estimated_days: int
    estimated_completion_date: str
    priority: str


@router.post("", response_model=QuoteResponse)
def create_quote(
    request: QuoteRequest,
    config: InsightConfig = Depends(get_config),
) -> QuoteResponse:
    quote = quote_request(request.model_dump(), config)
    return QuoteResponse(**quote.to_dict())
