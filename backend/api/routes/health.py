"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shared.config import get_settings
from shared.exceptions import ExternalServiceError
from api.dependencies import ServiceContainer, get_container

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    storage: str
    profile_source: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    container: ServiceContainer = Depends(get_container),
) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Verifies that the snapshot storage can be read.
    """
    settings = get_settings()
    try:
        container.storage.load(settings.storage_key)
        storage = "available"
    except ExternalServiceError as e:
        logger.warning(f"Readiness check failed: {e.message}")
        storage = "unavailable"

    return ReadinessResponse(
        status="ready" if storage == "available" else "degraded",
        storage=storage,
        profile_source=settings.profile_source,
    )
