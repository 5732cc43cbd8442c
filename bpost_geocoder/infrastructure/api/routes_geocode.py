"""Geocoding endpoint — forwards an address to bpost."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from bpost_geocoder.application.use_cases.geocode_address import GeocodeAddressUseCase
from bpost_geocoder.domain.exceptions import (
    GeocoderError,
    InvalidArgument,
    InvalidCredentials,
    InvalidServerResponse,
    QuotaExceeded,
    UnsupportedOperation,
)
from bpost_geocoder.infrastructure.api.dependencies import get_geocode_address_uc
from bpost_geocoder.infrastructure.api.schemas import AddressOut, GeocodeRequest, GeocodeResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/geocode", tags=["geocode"])

ERROR_STATUS: dict[type[GeocoderError], int] = {
    InvalidArgument: 400,
    UnsupportedOperation: 400,
    InvalidCredentials: 502,
    QuotaExceeded: 429,
    InvalidServerResponse: 502,
}


@router.post("", response_model=GeocodeResponse)
async def geocode(
    body: GeocodeRequest,
    uc: GeocodeAddressUseCase = Depends(get_geocode_address_uc),
):
    """Validate a Belgian address and return its coordinates."""
    try:
        addresses = await uc.execute(
            body.text,
            locale=body.locale,
            street_name=body.street_name,
            street_number=body.street_number,
            postal_code=body.postal_code,
            locality=body.locality,
        )
    except GeocoderError as e:
        status_code = ERROR_STATUS.get(type(e), 502)
        logger.warning("Geocoding '%s' failed: %s", body.text, e)
        raise HTTPException(status_code=status_code, detail=str(e))

    return GeocodeResponse(
        provider=uc.provider_name,
        count=len(addresses),
        results=[AddressOut.from_entity(a) for a in addresses],
    )
