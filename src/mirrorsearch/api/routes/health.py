"""Health check endpoints."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Request

from mirrorsearch import __version__
from mirrorsearch.api.dependencies import Settings
from mirrorsearch.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Check the health status of the API and the networks it serves.",
)
async def health_check(request: Request, settings: Settings) -> HealthResponse:
    """Check API health status."""
    client = getattr(request.app.state, "search_client", None)
    status: Literal["healthy", "degraded", "unhealthy"] = "healthy" if client else "unhealthy"

    return HealthResponse(
        status=status,
        version=__version__,
        default_network=settings.default_network,
        networks=settings.network_names,
    )


@router.get(
    "/ready",
    operation_id="getReady",
    summary="Readiness check",
    description="Check if the API is ready to serve traffic.",
)
async def readiness_check(request: Request) -> dict[str, bool]:
    """Check if API is ready to serve traffic."""
    return {"ready": getattr(request.app.state, "search_client", None) is not None}
