"""
Portfolio Health Check Endpoints
Liveness and readiness probes for uptime monitoring and orchestration.
"""

import logging
import time
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from portfolio.api.deps import get_services
from portfolio.core.config import settings
from portfolio.services.container import Services

logger = logging.getLogger(__name__)


# =============================================================================
# Health Status Models
# =============================================================================


class HealthStatus(str, Enum):
    """Health status values for components and overall system."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


class ComponentHealth(BaseModel):
    """Health status for an individual component."""

    status: HealthStatus
    latency_ms: Optional[float] = None
    message: Optional[str] = None


class HealthResponse(BaseModel):
    """Full health check response."""

    status: HealthStatus
    timestamp: str
    components: dict[str, Any]
    version: str


class LivenessResponse(BaseModel):
    """Simple liveness check response."""

    status: str


# =============================================================================
# Health Check Functions
# =============================================================================


async def check_store(services: Services) -> ComponentHealth:
    """Ping the submission store and measure latency."""
    start_time = time.perf_counter()
    result = await services.store.ping()
    latency = round((time.perf_counter() - start_time) * 1000, 2)

    if result.get("status") == HealthStatus.HEALTHY.value:
        return ComponentHealth(
            status=HealthStatus.HEALTHY,
            latency_ms=latency,
            message="Database connection successful",
        )

    logger.error("Database health check failed")
    return ComponentHealth(
        status=HealthStatus.UNHEALTHY,
        latency_ms=latency,
        message="Database connection failed",
    )


def check_configured(client: Any, name: str) -> ComponentHealth:
    """
    Report whether an external client has credentials.

    Missing credentials degrade the service rather than take it down;
    the other endpoint keeps working.
    """
    is_configured = getattr(client, "is_configured", None)
    if is_configured is None or is_configured():
        return ComponentHealth(status=HealthStatus.HEALTHY, message=f"{name} configured")
    return ComponentHealth(status=HealthStatus.DEGRADED, message=f"{name} not configured")


def determine_overall_status(components: dict[str, ComponentHealth]) -> HealthStatus:
    """
    Determine overall system health based on component statuses.

    - UNHEALTHY: If the database is unhealthy
    - DEGRADED: If any other component is degraded or unhealthy
    - HEALTHY: Otherwise
    """
    database = components.get("database")
    if database and database.status == HealthStatus.UNHEALTHY:
        return HealthStatus.UNHEALTHY

    if any(component.status != HealthStatus.HEALTHY for component in components.values()):
        return HealthStatus.DEGRADED

    return HealthStatus.HEALTHY


# =============================================================================
# Router Definition
# =============================================================================

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(
    "",
    response_model=LivenessResponse,
    summary="Basic liveness check",
)
async def basic_health() -> LivenessResponse:
    """Always OK while the process is serving requests."""
    return LivenessResponse(status="ok")


@router.get(
    "/ready",
    response_model=HealthResponse,
    summary="Readiness probe",
    responses={503: {"model": HealthResponse}},
)
async def readiness_probe(
    response: Response,
    services: Services = Depends(get_services),
) -> HealthResponse:
    """
    Readiness probe.

    Returns 503 when the submission store is unreachable.
    """
    components = {
        "database": await check_store(services),
        "mail": check_configured(services.transport, "SendGrid"),
        "generator": check_configured(services.generator, "Anthropic"),
    }
    overall = determine_overall_status(components)

    if overall == HealthStatus.UNHEALTHY:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return HealthResponse(
        status=overall,
        timestamp=datetime.now(timezone.utc).isoformat(),
        components={name: component.model_dump(exclude_none=True) for name, component in components.items()},
        version=settings.app_version,
    )
