"""NormalizedAddress entity — one address resolved by a provider."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class NormalizedAddress:
    latitude: float
    longitude: float
    street_number: str | None
    street_name: str | None
    locality: str | None
    postal_code: str | None
    country: str | None
    country_code: str | None
    provided_by: str

    def to_dict(self) -> dict:
        return asdict(self)
