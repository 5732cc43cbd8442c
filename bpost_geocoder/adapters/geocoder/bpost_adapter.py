"""bpost geocoder adapter — implements GeocoderPort.

Wraps the bpost address validation service (ExternalMailingAddressProofing
``validateAddresses``). The service only knows Belgian addresses: every
request is sent with "BE" as delivering and dispatching country, and this is
not configurable.
"""

from __future__ import annotations

import ipaddress
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from bpost_geocoder.adapters.geocoder.bpost_schemas import (
    BELGIUM_ISO_CODE,
    AddressToValidate,
    StructuredDeliveryPointLocation,
    StructuredPostalCodeMunicipality,
    ValidateAddressesRequestEnvelope,
    ValidateAddressesResponseEnvelope,
    ValidatedAddressResult,
)
from bpost_geocoder.application.ports.geocoder_port import GeocoderPort
from bpost_geocoder.domain.entities.address import NormalizedAddress
from bpost_geocoder.domain.exceptions import (
    InvalidArgument,
    InvalidCredentials,
    InvalidServerResponse,
    QuotaExceeded,
    UnsupportedOperation,
)
from bpost_geocoder.domain.value_objects.enums import AddressField, BpostEnvironment
from bpost_geocoder.domain.value_objects.queries import GeocodeQuery, ReverseQuery

logger = logging.getLogger(__name__)

ENDPOINT_URLS: dict[BpostEnvironment, str] = {
    BpostEnvironment.LEGACY: (
        "https://webservices-pub.bpost.be/ws/ExternalMailingAddressProofingCSREST_v1/address/validateAddresses"
    ),
    BpostEnvironment.TEST: (
        "https://api.mailops-np.bpost.cloud/roa-info-st2/externalMailingAddressProofingRest/validateAddresses"
    ),
    BpostEnvironment.UAT: (
        "https://api.mailops-np.bpost.cloud/roa-info-ac/externalMailingAddressProofingRest/validateAddresses"
    ),
    BpostEnvironment.PRODUCTION: (
        "https://api.mailops.bpost.cloud/roa-info/externalMailingAddressProofingRest/validateAddresses"
    ),
}

API_KEY_HEADER = "x-api-key"


def _is_ip_address(text: str) -> bool:
    try:
        ipaddress.ip_address(text.strip())
    except ValueError:
        return False
    return True


def _blank_to_none(value: str | None) -> str | None:
    return value if value else None


class BpostAdapter(GeocoderPort):
    """bpost implementation of GeocoderPort (Belgium only)."""

    NAME = "bpost"

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str | None = None,
        environment: BpostEnvironment = BpostEnvironment.LEGACY,
        endpoint_url: str | None = None,
        default_locale: str | None = None,
    ):
        self._client = client
        self._api_key = api_key or None
        self._environment = environment
        self._endpoint_url = endpoint_url or ENDPOINT_URLS[environment]
        self._default_locale = default_locale or None

    @property
    def endpoint_url(self) -> str:
        return self._endpoint_url

    def get_name(self) -> str:
        return self.NAME

    async def geocode_query(self, query: GeocodeQuery) -> list[NormalizedAddress]:
        """Validate an address with bpost and return the matching addresses.

        Raises before any network call when the text is an IP address, is
        empty, or when the environment needs an API key and none is set.
        """
        text = query.text or ""
        # This API does not support IP
        if _is_ip_address(text):
            raise UnsupportedOperation(
                f"The {self.NAME} provider does not support IP addresses, only street addresses."
            )
        # Blank or "0" counts as no address
        if text.strip() in ("", "0"):
            raise InvalidArgument("Address cannot be empty.")
        if self._environment.requires_api_key and not self._api_key:
            raise InvalidCredentials(f"No API key provided for the {self.NAME} provider.")

        envelope = ValidateAddressesRequestEnvelope.for_address(self._build_address_to_validate(query))
        payload = await self._execute_query(self.endpoint_url, envelope.to_json())

        addresses = self._parse_results(payload)
        logger.info("bpost resolved '%s' → %d address(es)", text, len(addresses))
        return addresses

    async def reverse_query(self, query: ReverseQuery) -> list[NormalizedAddress]:
        raise UnsupportedOperation(f"The {self.NAME} provider does not support reverse geocoding.")

    def _build_address_to_validate(self, query: GeocodeQuery) -> AddressToValidate:
        street_name = query.get_data(AddressField.STREET_NAME.value)
        street_number = query.get_data(AddressField.STREET_NUMBER.value)

        if street_name is not None and street_number is not None:
            return AddressToValidate.structured(
                street_name=street_name,
                street_number=street_number,
                postal_code=query.get_data(AddressField.POSTAL_CODE.value, "") or "",
                locality=query.get_data(AddressField.LOCALITY.value, "") or "",
            )

        return AddressToValidate.unstructured(query.text, locale=query.locale or self._default_locale)

    async def _execute_query(self, url: str, body: str) -> dict[str, Any]:
        response = await self._post_url_contents(url, body)
        try:
            payload = response.json()
        except ValueError:
            logger.warning("bpost returned a non-JSON body for %s", url)
            raise InvalidServerResponse.create(url)

        # API error
        if not isinstance(payload, dict):
            logger.warning("bpost returned an unexpected JSON document for %s", url)
            raise InvalidServerResponse.create(url)

        return payload

    async def _post_url_contents(self, url: str, body: str) -> httpx.Response:
        """POST *body* to *url* and return the response once it has a usable body.

        Raises InvalidCredentials on 401/403, QuotaExceeded on 429 and
        InvalidServerResponse for any other status >= 300 or an empty body.
        """
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers[API_KEY_HEADER] = self._api_key

        logger.debug("POST %s (%d bytes)", url, len(body))
        try:
            response = await self._client.post(url, content=body, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("bpost request to %s failed: %s", url, exc)
            raise InvalidServerResponse.create(url) from exc

        status_code = response.status_code
        if status_code in (401, 403):
            raise InvalidCredentials()
        if status_code == 429:
            raise QuotaExceeded()
        if status_code >= 300:
            raise InvalidServerResponse.create(url, status_code)

        if not response.text:
            raise InvalidServerResponse.empty_response(url)

        return response

    def _parse_results(self, payload: dict[str, Any]) -> list[NormalizedAddress]:
        try:
            envelope = ValidateAddressesResponseEnvelope.model_validate(payload)
        except ValidationError:
            logger.warning("bpost response has a malformed result list, treating as no result")
            return []

        results: list[NormalizedAddress] = []
        for index, raw in enumerate(envelope.raw_results):
            try:
                result = ValidatedAddressResult.model_validate(raw)
            except ValidationError:
                logger.warning("Skipping malformed bpost result #%d", index)
                continue

            address = self._to_address(result)
            if address is None:
                logger.debug("Skipping bpost result #%d without location or postal address", index)
                continue
            results.append(address)

        return results

    def _to_address(self, result: ValidatedAddressResult) -> NormalizedAddress | None:
        validated = result.best_match()
        if validated is None or validated.service_point_detail is None or validated.postal_address is None:
            return None

        coordinates = validated.service_point_detail.coordinates
        if coordinates is None:
            return None
        latitude, longitude = coordinates

        postal_address = validated.postal_address
        delivery_point = postal_address.delivery_point or StructuredDeliveryPointLocation()
        municipality = postal_address.postal_code_municipality or StructuredPostalCodeMunicipality()

        return NormalizedAddress(
            latitude=latitude,
            longitude=longitude,
            street_number=_blank_to_none(delivery_point.street_number),
            street_name=_blank_to_none(delivery_point.street_name),
            locality=_blank_to_none(municipality.municipality_name),
            postal_code=_blank_to_none(municipality.postal_code),
            country=_blank_to_none(postal_address.country_name),
            country_code=BELGIUM_ISO_CODE,
            provided_by=self.NAME,
        )
