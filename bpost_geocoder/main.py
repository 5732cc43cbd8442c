"""bpost geocoder — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from bpost_geocoder.config import settings
from bpost_geocoder.infrastructure.api.routes_geocode import router as geocode_router
from bpost_geocoder.infrastructure.api.routes_health import router as health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    app.state.http_client = httpx.AsyncClient(timeout=settings.http_timeout)
    logger.info("bpost geocoder started (environment=%s)", settings.bpost_environment.value)
    yield
    await app.state.http_client.aclose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="bpost geocoder",
        description="Belgian address validation and geocoding through bpost",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.include_router(health_router, prefix="/api")
    app.include_router(geocode_router, prefix="/api")

    return app


app = create_app()
