"""Health check endpoint for load balancers and container probes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from recipe_engine.core.config import Settings, get_settings
from recipe_engine.schemas.health import HealthResponse


router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Basic health check to verify the service is running.",
)
async def health_check(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Report that the service is alive. No dependencies are checked."""
    return HealthResponse(
        status="healthy",
        version=settings.app.version,
        environment=settings.APP_ENV,
    )
