"""Health check endpoint."""

from fastapi import APIRouter, Depends

from bpost_geocoder.application.ports.geocoder_port import GeocoderPort
from bpost_geocoder.config import settings
from bpost_geocoder.infrastructure.api.dependencies import get_geocoder

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(geocoder: GeocoderPort = Depends(get_geocoder)):
    """Report the configured provider. Does not call bpost."""
    credentials = "configured" if settings.bpost_api_key else "missing"
    if settings.bpost_environment.requires_api_key and not settings.bpost_api_key:
        status = "degraded"
    else:
        status = "ok"

    return {
        "status": status,
        "provider": geocoder.get_name(),
        "environment": settings.bpost_environment.value,
        "api_key": credentials,
    }
