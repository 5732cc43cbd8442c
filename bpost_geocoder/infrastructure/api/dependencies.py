"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

import httpx
from fastapi import Depends, Request

from bpost_geocoder.adapters.geocoder.bpost_adapter import BpostAdapter
from bpost_geocoder.application.ports.geocoder_port import GeocoderPort
from bpost_geocoder.application.use_cases.geocode_address import GeocodeAddressUseCase
from bpost_geocoder.config import settings


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Shared client opened in the app lifespan."""
    return request.app.state.http_client


def get_geocoder(client: httpx.AsyncClient = Depends(get_http_client)) -> GeocoderPort:
    return BpostAdapter(
        client,
        api_key=settings.bpost_api_key,
        environment=settings.bpost_environment,
        endpoint_url=settings.bpost_endpoint_url,
        default_locale=settings.bpost_default_locale,
    )


def get_geocode_address_uc(geocoder: GeocoderPort = Depends(get_geocoder)) -> GeocodeAddressUseCase:
    return GeocodeAddressUseCase(geocoder=geocoder)
