"""Request/response schemas for the HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from bpost_geocoder.domain.entities.address import NormalizedAddress


class GeocodeRequest(BaseModel):
    text: str = Field(..., description="Free-text Belgian address")
    locale: str | None = None
    street_name: str | None = None
    street_number: str | None = None
    postal_code: str | None = None
    locality: str | None = None


class AddressOut(BaseModel):
    latitude: float
    longitude: float
    street_number: str | None = None
    street_name: str | None = None
    locality: str | None = None
    postal_code: str | None = None
    country: str | None = None
    country_code: str | None = None
    provided_by: str

    @classmethod
    def from_entity(cls, address: NormalizedAddress) -> AddressOut:
        return cls(**address.to_dict())


class GeocodeResponse(BaseModel):
    provider: str
    count: int
    results: list[AddressOut]
