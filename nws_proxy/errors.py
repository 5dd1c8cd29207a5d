"""Lookup failures raised by the normalizer and converted to responses at the edge."""

from __future__ import annotations


class WeatherLookupError(Exception):
    """Base class: carries the caller-facing message and HTTP status."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LocationNotSupportedError(WeatherLookupError):
    """The points lookup gave no forecast URL (e.g. coordinates outside the US)."""

    status_code = 400

    def __init__(self, message: str = "Invalid location or unsupported by NWS (US only)"):
        super().__init__(message)


class DataRetrievalError(WeatherLookupError):
    """Upstream failed or returned a document without the expected data."""

    status_code = 500
