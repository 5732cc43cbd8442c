"""GeocodeAddressUseCase — resolve one address through a geocoder provider."""

from __future__ import annotations

import logging

from bpost_geocoder.application.ports.geocoder_port import GeocoderPort
from bpost_geocoder.domain.entities.address import NormalizedAddress
from bpost_geocoder.domain.value_objects.enums import AddressField
from bpost_geocoder.domain.value_objects.queries import GeocodeQuery

logger = logging.getLogger(__name__)


class GeocodeAddressUseCase:
    """Builds a GeocodeQuery from loose fields and hands it to the provider."""

    def __init__(self, geocoder: GeocoderPort):
        self._geocoder = geocoder

    @property
    def provider_name(self) -> str:
        return self._geocoder.get_name()

    async def execute(
        self,
        text: str,
        locale: str | None = None,
        street_name: str | None = None,
        street_number: str | None = None,
        postal_code: str | None = None,
        locality: str | None = None,
    ) -> list[NormalizedAddress]:
        """Geocode an address.

        Args:
            text: free-text address, always required.
            locale: optional locale tag for the free-text line.
            street_name, street_number, postal_code, locality: optional
                structured fields; only unset ones are left out of the query.

        Returns:
            Addresses in provider order, possibly empty.
        """
        query = GeocodeQuery.create(text).with_locale(locale)
        structured = {
            AddressField.STREET_NAME: street_name,
            AddressField.STREET_NUMBER: street_number,
            AddressField.POSTAL_CODE: postal_code,
            AddressField.LOCALITY: locality,
        }
        for field_name, value in structured.items():
            if value is not None:
                query = query.with_data(field_name.value, value)

        addresses = await self._geocoder.geocode_query(query)
        if not addresses:
            logger.info("%s found no address for '%s'", self._geocoder.get_name(), text)
        return addresses
