from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class BaseAPIException(Exception):
    """Base exception for all API errors."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.code = code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ValidationErrorKind(str, Enum):
    MISSING_REQUIRED = "missing_required"
    INVALID_EMAIL = "invalid_email"
    CONSENT_REQUIRED = "consent_required"
    INVALID_ZIP = "invalid_zip"
    INVALID_PHONE = "invalid_phone"
    INVALID_BUDGET = "invalid_budget"


class ValidationError(BaseAPIException):
    """A lead submission failed one of the ordered field checks."""

    def __init__(self, kind: ValidationErrorKind, message: str, **kwargs):
        super().__init__(message, status_code=400, code=kind.value, **kwargs)
        self.kind = kind


class GeocodeError(BaseAPIException):
    """Geocoding lookup failed."""

    def __init__(self, message: str = "Geocoding failed", **kwargs):
        kwargs.setdefault("code", "geocode_error")
        super().__init__(message, status_code=500, **kwargs)


class GeocodeConfigError(GeocodeError):
    """Geocoding credential is missing; no request was sent."""

    def __init__(self, message: str = "Geocoding API key is not configured", **kwargs):
        super().__init__(message, code="geocode_config_error", **kwargs)


class GeocodeNetworkError(GeocodeError):
    """Transport failure or non-success HTTP status from the geocoding API."""

    def __init__(self, message: str = "Geocoding HTTP error", http_status: Optional[int] = None, **kwargs):
        super().__init__(message, code="geocode_network_error", **kwargs)
        self.http_status = http_status


class GeocodeLookupError(GeocodeError):
    """Geocoding API answered with a non-OK status or no results."""

    def __init__(self, message: str = "Geocoding lookup failed", upstream_status: Optional[str] = None, **kwargs):
        super().__init__(message, code="geocode_lookup_error", **kwargs)
        self.upstream_status = upstream_status


class GeocodeDataError(GeocodeError):
    """Geocoding result has no numeric coordinates."""

    def __init__(self, message: str = "Invalid lat/lng from geocoding API", **kwargs):
        super().__init__(message, code="geocode_data_error", **kwargs)


class PersistenceError(BaseAPIException):
    """The lead documents could not be written."""

    def __init__(self, message: str = "Could not save lead", **kwargs):
        kwargs.setdefault("code", "persistence_error")
        super().__init__(message, status_code=500, **kwargs)
