"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class BpostEnvironment(str, Enum):
    """Deployment generation of the bpost address validation service."""

    LEGACY = "legacy"
    TEST = "test"
    UAT = "uat"
    PRODUCTION = "production"

    @property
    def requires_api_key(self) -> bool:
        return self is not BpostEnvironment.LEGACY


class AddressField(str, Enum):
    """Auxiliary query keys carrying a structured address."""

    STREET_NAME = "streetName"
    STREET_NUMBER = "streetNumber"
    POSTAL_CODE = "postalCode"
    LOCALITY = "locality"
