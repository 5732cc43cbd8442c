"""Pydantic models for the bpost validateAddresses wire format.

Request models are dumped with ``by_alias=True, exclude_none=True``.
Response models make every field optional: an absent branch is ``None``
(or an empty list) and the adapter decides whether that skips an entry or
only blanks a field.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidatorFunctionWrapHandler, field_validator

# The service only validates Belgian addresses
BELGIUM_ISO_CODE = "BE"
CALLER_NAME = "Geocoder PHP"


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)


def _none_on_error(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    """Unparseable optional leaf: blank it instead of rejecting the parent."""
    try:
        return handler(value)
    except ValidationError:
        return None


# ─── Shared fragments ───────────────────────────────────────────────


class StructuredDeliveryPointLocation(WireModel):
    street_name: str | None = Field(default=None, alias="StreetName")
    street_number: str | None = Field(default=None, alias="StreetNumber")

    @field_validator("street_name", "street_number", mode="wrap")
    @classmethod
    def _lenient_leaves(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        return _none_on_error(value, handler)


class StructuredPostalCodeMunicipality(WireModel):
    postal_code: str | None = Field(default=None, alias="PostalCode")
    municipality_name: str | None = Field(default=None, alias="MunicipalityName")

    @field_validator("postal_code", "municipality_name", mode="wrap")
    @classmethod
    def _lenient_leaves(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        return _none_on_error(value, handler)


# ─── Request ────────────────────────────────────────────────────────


class DeliveryPointLocation(WireModel):
    structured: StructuredDeliveryPointLocation = Field(alias="StructuredDeliveryPointLocation")


class PostalCodeMunicipality(WireModel):
    structured: StructuredPostalCodeMunicipality = Field(alias="StructuredPostalCodeMunicipality")


class PostalAddressToValidate(WireModel):
    delivery_point_location: DeliveryPointLocation = Field(alias="DeliveryPointLocation")
    postal_code_municipality: PostalCodeMunicipality = Field(alias="PostalCodeMunicipality")


class LocalizedAddressLine(WireModel):
    body: str = Field(alias="*body*")
    locale: str = Field(alias="@locale")


class AddressBlockLines(WireModel):
    unstructured_address_line: str | LocalizedAddressLine = Field(alias="UnstructuredAddressLine")


class AddressToValidate(WireModel):
    id: int = Field(default=1, alias="@id")
    address_block_lines: AddressBlockLines | None = Field(default=None, alias="AddressBlockLines")
    postal_address: PostalAddressToValidate | None = Field(default=None, alias="PostalAddress")
    delivering_country_iso_code: str = Field(default=BELGIUM_ISO_CODE, alias="DeliveringCountryISOCode")
    dispatching_country_iso_code: str = Field(default=BELGIUM_ISO_CODE, alias="DispatchingCountryISOCode")

    @classmethod
    def structured(
        cls,
        street_name: str,
        street_number: str,
        postal_code: str = "",
        locality: str = "",
    ) -> AddressToValidate:
        return cls(
            postal_address=PostalAddressToValidate(
                delivery_point_location=DeliveryPointLocation(
                    structured=StructuredDeliveryPointLocation(
                        street_name=street_name,
                        street_number=street_number,
                    ),
                ),
                postal_code_municipality=PostalCodeMunicipality(
                    structured=StructuredPostalCodeMunicipality(
                        postal_code=postal_code,
                        municipality_name=locality,
                    ),
                ),
            ),
        )

    @classmethod
    def unstructured(cls, line: str, locale: str | None = None) -> AddressToValidate:
        if locale:
            address_line: str | LocalizedAddressLine = LocalizedAddressLine(body=line, locale=locale)
        else:
            address_line = line
        return cls(address_block_lines=AddressBlockLines(unstructured_address_line=address_line))


class AddressToValidateList(WireModel):
    address_to_validate: list[AddressToValidate] = Field(alias="AddressToValidate")


class ValidateAddressOptions(WireModel):
    include_suggestions: bool = Field(default=False, alias="IncludeSuggestions")
    include_default_geo_location: bool = Field(default=True, alias="IncludeDefaultGeoLocation")
    include_submitted_address: bool = Field(default=True, alias="IncludeSubmittedAddress")


class CallerIdentification(WireModel):
    caller_name: str = Field(default=CALLER_NAME, alias="CallerName")


class ValidateAddressesRequest(WireModel):
    address_to_validate_list: AddressToValidateList = Field(alias="AddressToValidateList")
    validate_address_options: ValidateAddressOptions = Field(
        default_factory=ValidateAddressOptions, alias="ValidateAddressOptions"
    )
    caller_identification: CallerIdentification = Field(
        default_factory=CallerIdentification, alias="CallerIdentification"
    )


class ValidateAddressesRequestEnvelope(WireModel):
    request: ValidateAddressesRequest = Field(alias="ValidateAddressesRequest")

    @classmethod
    def for_address(cls, address: AddressToValidate) -> ValidateAddressesRequestEnvelope:
        return cls(
            request=ValidateAddressesRequest(
                address_to_validate_list=AddressToValidateList(address_to_validate=[address]),
            ),
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


# ─── Response ───────────────────────────────────────────────────────


class CoordinateValue(WireModel):
    value: float | None = Field(default=None, alias="Value")


class GeographicalLocation(WireModel):
    latitude: CoordinateValue | None = Field(default=None, alias="Latitude")
    longitude: CoordinateValue | None = Field(default=None, alias="Longitude")


class GeographicalLocationInfo(WireModel):
    geographical_location: GeographicalLocation | None = Field(default=None, alias="GeographicalLocation")


class ServicePointDetail(WireModel):
    geographical_location_info: GeographicalLocationInfo | None = Field(
        default=None, alias="GeographicalLocationInfo"
    )

    @property
    def coordinates(self) -> tuple[float, float] | None:
        """(latitude, longitude) when both values are present."""
        info = self.geographical_location_info
        location = info.geographical_location if info else None
        if location is None or location.latitude is None or location.longitude is None:
            return None
        if location.latitude.value is None or location.longitude.value is None:
            return None
        return location.latitude.value, location.longitude.value


class ValidatedPostalAddress(WireModel):
    delivery_point: StructuredDeliveryPointLocation | None = Field(
        default=None, alias="StructuredDeliveryPointLocation"
    )
    postal_code_municipality: StructuredPostalCodeMunicipality | None = Field(
        default=None, alias="StructuredPostalCodeMunicipality"
    )
    country_name: str | None = Field(default=None, alias="CountryName")

    @field_validator("delivery_point", "postal_code_municipality", "country_name", mode="wrap")
    @classmethod
    def _lenient_parts(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        return _none_on_error(value, handler)


class ValidatedAddress(WireModel):
    service_point_detail: ServicePointDetail | None = Field(default=None, alias="ServicePointDetail")
    postal_address: ValidatedPostalAddress | None = Field(default=None, alias="PostalAddress")


def _as_list(value: Any) -> Any:
    """The service collapses one-element arrays into a bare object now and then."""
    if value is None:
        return []
    if isinstance(value, dict):
        return [value]
    return value


class ValidatedAddressList(WireModel):
    # Only the first address is ever read, so the rest stay raw
    validated_address: list[Any] = Field(default_factory=list, alias="ValidatedAddress")

    @field_validator("validated_address", mode="before")
    @classmethod
    def _wrap_single_address(cls, value: Any) -> Any:
        return _as_list(value)


class ValidatedAddressResult(WireModel):
    validated_address_list: ValidatedAddressList | None = Field(default=None, alias="ValidatedAddressList")

    def best_match(self) -> ValidatedAddress | None:
        """First validated address, or None when absent or unusable."""
        if self.validated_address_list is None or not self.validated_address_list.validated_address:
            return None
        try:
            return ValidatedAddress.model_validate(self.validated_address_list.validated_address[0])
        except ValidationError:
            return None


class ValidatedAddressResultList(WireModel):
    # Entries stay raw so one malformed entry cannot reject its siblings
    validated_address_result: list[Any] = Field(default_factory=list, alias="ValidatedAddressResult")

    @field_validator("validated_address_result", mode="before")
    @classmethod
    def _wrap_single_result(cls, value: Any) -> Any:
        return _as_list(value)


class ValidateAddressesResponse(WireModel):
    validated_address_result_list: ValidatedAddressResultList | None = Field(
        default=None, alias="ValidatedAddressResultList"
    )


class ValidateAddressesResponseEnvelope(WireModel):
    response: ValidateAddressesResponse | None = Field(default=None, alias="ValidateAddressesResponse")

    @property
    def raw_results(self) -> list[Any]:
        if self.response is None or self.response.validated_address_result_list is None:
            return []
        return self.response.validated_address_result_list.validated_address_result
