"""Pytest configuration and shared fixtures."""

import copy

import pytest

PLACE_DES_PALAIS_RESPONSE = {
    "ValidateAddressesResponse": {
        "ValidatedAddressResultList": {
            "ValidatedAddressResult": [
                {
                    "@id": 1,
                    "DetectedInputDataLanguage": "fr",
                    "ValidatedAddressList": {
                        "ValidatedAddress": [
                            {
                                "PostalAddress": {
                                    "StructuredDeliveryPointLocation": {
                                        "StreetName": "PLACE DES PALAIS",
                                        "StreetNumber": "5",
                                    },
                                    "StructuredPostalCodeMunicipality": {
                                        "PostalCode": "1000",
                                        "MunicipalityName": "BRUXELLES",
                                    },
                                    "CountryName": "BELGIQUE",
                                },
                                "ServicePointDetail": {
                                    "GeographicalLocationInfo": {
                                        "GeographicalLocation": {
                                            "Latitude": {
                                                "Value": 50.842931,
                                                "CoordinateReferenceSystemCode": "WGS84",
                                            },
                                            "Longitude": {
                                                "Value": 4.361186,
                                                "CoordinateReferenceSystemCode": "WGS84",
                                            },
                                        },
                                    },
                                },
                                "AddressLanguage": "fr",
                            }
                        ]
                    },
                }
            ]
        }
    }
}


@pytest.fixture
def palais_response():
    return copy.deepcopy(PLACE_DES_PALAIS_RESPONSE)


@pytest.fixture
def palais_entry(palais_response):
    """The single ValidatedAddressResult of the Place des Palais response."""
    results = palais_response["ValidateAddressesResponse"]["ValidatedAddressResultList"]
    return results["ValidatedAddressResult"][0]


@pytest.fixture
def empty_response():
    return {"ValidateAddressesResponse": {"ValidatedAddressResultList": {"ValidatedAddressResult": []}}}
