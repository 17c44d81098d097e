"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
No business logic. Returns application status and version in an envelope.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from app.core.config import settings
from app.shared.envelope import Envelope

router = APIRouter(tags=["health"])


class HealthStatus(BaseModel):
    """Health payload."""

    status: str
    version: str


@router.get(
    "/health",
    response_model=Envelope[HealthStatus],
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check() -> Envelope[HealthStatus]:
    """Return current application health status."""
    return Envelope[HealthStatus].successful_response(
        "Service is healthy", HealthStatus(status="ok", version=settings.version)
    )
