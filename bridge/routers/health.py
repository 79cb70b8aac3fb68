"""Health-check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from bridge import __version__
from bridge.models.responses import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def service_health() -> HealthResponse:
    """Basic liveness probe (no auth required)."""
    return HealthResponse(status="ok", version=__version__)
