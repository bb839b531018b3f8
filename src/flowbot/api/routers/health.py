"""
Health check endpoints.
"""

from fastapi import APIRouter

from ...shared import get_metrics, get_settings
from ..models import HealthResponse, utc_timestamp

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    The service is healthy even with no provider configured, since the
    local generator always answers.
    """
    settings = get_settings()

    services = dict(settings.provider_status)
    services["local_generator"] = "ready"
    services["metrics"] = "collecting" if settings.enable_metrics else "disabled"

    return HealthResponse(
        status="healthy",
        services=services,
        timestamp=utc_timestamp()
    )


@router.get("/health/metrics")
async def metrics_snapshot():
    """Collected request and provider metrics."""
    return {
        "metrics": get_metrics().get_all_metrics(),
        "timestamp": utc_timestamp()
    }
