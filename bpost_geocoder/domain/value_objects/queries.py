"""Query value objects handed to a geocoder provider."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping

from bpost_geocoder.domain.value_objects.geo_point import GeoPoint


@dataclass(frozen=True)
class GeocodeQuery:
    """Free-text address plus optional locale and structured fields.

    Structured fields live in ``data`` under the keys of
    :class:`~bpost_geocoder.domain.value_objects.enums.AddressField`
    (``streetName``, ``streetNumber``, ``postalCode``, ``locality``).
    """

    text: str
    locale: str | None = None
    data: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze the mapping so callers cannot mutate a query after the fact
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    @classmethod
    def create(cls, text: str) -> GeocodeQuery:
        return cls(text=text)

    def with_locale(self, locale: str | None) -> GeocodeQuery:
        return replace(self, locale=locale)

    def with_data(self, name: str, value: str) -> GeocodeQuery:
        return replace(self, data={**self.data, name: value})

    def get_data(self, name: str, default: str | None = None) -> str | None:
        return self.data.get(name, default)


@dataclass(frozen=True)
class ReverseQuery:
    coordinates: GeoPoint
    locale: str | None = None

    @classmethod
    def from_coordinates(cls, latitude: float, longitude: float) -> ReverseQuery:
        return cls(coordinates=GeoPoint(latitude=latitude, longitude=longitude))
