"""Port interface for geocoding providers."""

from abc import ABC, abstractmethod

from bpost_geocoder.domain.entities.address import NormalizedAddress
from bpost_geocoder.domain.value_objects.queries import GeocodeQuery, ReverseQuery


class GeocoderPort(ABC):
    @abstractmethod
    async def geocode_query(self, query: GeocodeQuery) -> list[NormalizedAddress]:
        """Resolve an address query into zero or more addresses.

        An empty list means the provider found nothing; failures are raised
        as :class:`~bpost_geocoder.domain.exceptions.GeocoderError`.
        """
        ...

    @abstractmethod
    async def reverse_query(self, query: ReverseQuery) -> list[NormalizedAddress]:
        """Resolve coordinates into addresses."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Provider identifier used for provenance tagging."""
        ...
