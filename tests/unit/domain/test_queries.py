"""Tests for GeocodeQuery and ReverseQuery value objects."""

import pytest

from bpost_geocoder.domain.value_objects.geo_point import GeoPoint
from bpost_geocoder.domain.value_objects.queries import GeocodeQuery, ReverseQuery


def test_create_has_no_locale_or_data():
    q = GeocodeQuery.create("35 avenue jean de bologne 1020 bruxelles")
    assert q.text == "35 avenue jean de bologne 1020 bruxelles"
    assert q.locale is None
    assert q.get_data("streetName") is None


def test_with_data_returns_new_query():
    q = GeocodeQuery.create("Place des Palais 5")
    q2 = q.with_data("streetName", "Place des Palais")
    assert q.get_data("streetName") is None
    assert q2.get_data("streetName") == "Place des Palais"
    assert q2.text == q.text


def test_with_locale_returns_new_query():
    q = GeocodeQuery.create("Rue de la Loi 16").with_locale("fr")
    assert q.locale == "fr"


def test_get_data_default():
    q = GeocodeQuery.create("x")
    assert q.get_data("postalCode", "") == ""


def test_query_data_is_read_only():
    q = GeocodeQuery(text="x", data={"streetName": "A"})
    with pytest.raises(TypeError):
        q.data["streetName"] = "B"  # type: ignore[index]


def test_query_is_frozen():
    q = GeocodeQuery.create("x")
    with pytest.raises(AttributeError):
        q.text = "y"  # type: ignore[misc]


def test_source_mapping_changes_do_not_leak():
    data = {"streetName": "A"}
    q = GeocodeQuery(text="x", data=data)
    data["streetName"] = "B"
    assert q.get_data("streetName") == "A"


def test_reverse_query_from_coordinates():
    q = ReverseQuery.from_coordinates(50.0, 4.0)
    assert q.coordinates == GeoPoint(latitude=50.0, longitude=4.0)
