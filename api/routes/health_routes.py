# =============================================================================
# SUPPLIER MINIMAL API - HEALTH ROUTES
# =============================================================================
# File: api/routes/health_routes.py
# Description: Health check endpoints for monitoring and orchestration
# =============================================================================

from datetime import datetime, timezone
from typing import Dict, Any

from fastapi import APIRouter
from pydantic import BaseModel, Field

from db.factory import DBFactory
from db.adapters.postgres_adapter import PostgresAdapter
from core.config import settings


router = APIRouter(tags=["Health"])


# =============================================================================
# RESPONSE MODELS
# =============================================================================

class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(..., description="Overall status: healthy, degraded")
    timestamp: datetime = Field(..., description="Check timestamp")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Environment name")


class DetailedHealthResponse(HealthResponse):
    """Health check with component statuses."""
    components: Dict[str, Dict[str, Any]] = Field(
        default_factory=dict,
        description="Individual component health"
    )


# =============================================================================
# HEALTH ENDPOINTS
# =============================================================================

@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Basic health check",
    description="Quick health check for load balancers.",
)
async def health_check() -> HealthResponse:
    """
    Basic health check.

    Does not touch the database.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.app_version,
        environment=settings.app_env,
    )


@router.get(
    "/health/ready",
    response_model=DetailedHealthResponse,
    summary="Readiness check",
    description="Check if the service is ready to handle requests.",
)
async def readiness_check() -> DetailedHealthResponse:
    """
    Readiness check.

    Verifies the database answers queries.
    """
    adapter = DBFactory.get_db_adapter()
    database: Dict[str, Any] = {"type": settings.db_type}

    if await adapter.check_health():
        database["status"] = "healthy"
        overall_status = "healthy"
    else:
        database["status"] = "unhealthy"
        overall_status = "degraded"

    if isinstance(adapter, PostgresAdapter):
        database["pool"] = adapter.get_pool_status()

    return DetailedHealthResponse(
        status=overall_status,
        timestamp=datetime.now(timezone.utc),
        version=settings.app_version,
        environment=settings.app_env,
        components={"database": database},
    )
