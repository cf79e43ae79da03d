"""Dependency providers for v1 API."""

from __future__ import annotations

from fastapi import Request

from ....config import InsightConfig


def get_config(request: Request) -> InsightConfig:
    """Access runtime configuration from app state."""
    return request.app.state.config
