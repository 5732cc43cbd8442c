"""Tests for GeocodeAddressUseCase with an in-memory geocoder."""

from __future__ import annotations

import pytest

from bpost_geocoder.application.ports.geocoder_port import GeocoderPort
from bpost_geocoder.application.use_cases.geocode_address import GeocodeAddressUseCase
from bpost_geocoder.domain.entities.address import NormalizedAddress
from bpost_geocoder.domain.exceptions import InvalidArgument, UnsupportedOperation

# ─── In-memory fakes ────────────────────────────────────────────────


class FakeGeocoder(GeocoderPort):
    def __init__(self, results: list[NormalizedAddress] | None = None, error: Exception | None = None):
        self._results = results or []
        self._error = error
        self.queries = []

    async def geocode_query(self, query):
        self.queries.append(query)
        if self._error:
            raise self._error
        return self._results

    async def reverse_query(self, query):
        raise UnsupportedOperation("no reverse")

    def get_name(self):
        return "fake"


PALAIS = NormalizedAddress(
    latitude=50.842931, longitude=4.361186,
    street_number="5", street_name="PLACE DES PALAIS",
    locality="BRUXELLES", postal_code="1000",
    country="BELGIQUE", country_code="BE", provided_by="fake",
)


# ─── GeocodeAddressUseCase ──────────────────────────────────────────


@pytest.mark.asyncio
async def test_free_text_query():
    geocoder = FakeGeocoder([PALAIS])
    uc = GeocodeAddressUseCase(geocoder=geocoder)

    results = await uc.execute("Place des Palais 5, 1000 Bruxelles", locale="fr")

    assert results == [PALAIS]
    query = geocoder.queries[0]
    assert query.text == "Place des Palais 5, 1000 Bruxelles"
    assert query.locale == "fr"
    assert dict(query.data) == {}


@pytest.mark.asyncio
async def test_structured_fields_forwarded():
    geocoder = FakeGeocoder([PALAIS])
    uc = GeocodeAddressUseCase(geocoder=geocoder)

    await uc.execute(
        "Place des Palais 5",
        street_name="Place des Palais",
        street_number="5",
        postal_code="1000",
    )

    query = geocoder.queries[0]
    assert query.get_data("streetName") == "Place des Palais"
    assert query.get_data("streetNumber") == "5"
    assert query.get_data("postalCode") == "1000"
    assert query.get_data("locality") is None


@pytest.mark.asyncio
async def test_no_result_is_empty_list():
    uc = GeocodeAddressUseCase(geocoder=FakeGeocoder([]))
    assert await uc.execute("Nowhere") == []


@pytest.mark.asyncio
async def test_provider_errors_propagate():
    uc = GeocodeAddressUseCase(geocoder=FakeGeocoder(error=InvalidArgument("Address cannot be empty.")))
    with pytest.raises(InvalidArgument):
        await uc.execute("")


def test_provider_name():
    assert GeocodeAddressUseCase(geocoder=FakeGeocoder()).provider_name == "fake"
