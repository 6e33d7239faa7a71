"""Health endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter

from app.core.config import get_config
from app.schemas.common import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    cfg = get_config()
    return HealthResponse(status="ok", service=cfg.APP_NAME, version=cfg.APP_VERSION)
