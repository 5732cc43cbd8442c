"""Geocoder exception taxonomy.

Every failure a provider can report is one of these; nothing else is
raised to callers of a :class:`GeocoderPort`.
"""

from __future__ import annotations


class GeocoderError(Exception):
    """Base class for all provider failures."""


class InvalidArgument(GeocoderError):
    """The query cannot be sent (e.g. empty address)."""


class UnsupportedOperation(GeocoderError):
    """The provider does not handle this kind of query."""


class InvalidCredentials(GeocoderError):
    """API key missing or rejected by the service."""

    def __init__(self, message: str = "Invalid or missing API key."):
        super().__init__(message)


class QuotaExceeded(GeocoderError):
    """The service reported too many requests."""

    def __init__(self, message: str = "Quota exceeded."):
        super().__init__(message)


class InvalidServerResponse(GeocoderError):
    """Unusable reply: bad status code, empty body or non-JSON payload."""

    def __init__(self, message: str, url: str, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code

    @classmethod
    def create(cls, url: str, status_code: int | None = None) -> InvalidServerResponse:
        if status_code is None:
            return cls(f'The geocoder server returned an invalid response for query "{url}".', url)
        return cls(
            f'The geocoder server returned an invalid response ({status_code}) for query "{url}".',
            url,
            status_code,
        )

    @classmethod
    def empty_response(cls, url: str) -> InvalidServerResponse:
        return cls(f'The geocoder server returned an empty response for query "{url}".', url)
