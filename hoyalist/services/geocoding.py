from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional

import httpx

from hoyalist.core.exceptions import (
    GeocodeConfigError,
    GeocodeDataError,
    GeocodeLookupError,
    GeocodeNetworkError,
)

DEFAULT_GEOCODING_URL = "https://maps.googleapis.com/maps/api/geocode/json"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class GeoResult:
    latitude: float
    longitude: float
    town: str = ""
    state: str = ""


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _components_with_type(components: Iterable[Mapping[str, Any]], type_name: str):
    for component in components:
        if type_name in (component.get("types") or []):
            yield component


def extract_town_and_state(components: Iterable[Mapping[str, Any]]) -> tuple[str, str]:
    """
    Pick the town and state out of a result's address components.

    Town is the last ``locality`` long name, falling back to ``postal_town``.
    State is the ``administrative_area_level_1`` short name. Either may be
    empty.
    """
    components = list(components or [])
    town = ""
    state = ""
    for component in _components_with_type(components, "locality"):
        town = component.get("long_name") or ""
    for component in _components_with_type(components, "administrative_area_level_1"):
        state = component.get("short_name") or ""
    if not town:
        for component in _components_with_type(components, "postal_town"):
            town = component.get("long_name") or ""
    return town, state


def parse_geocode_response(data: Mapping[str, Any]) -> GeoResult:
    """Turn a Geocoding API JSON body into a GeoResult."""
    if not isinstance(data, Mapping):
        raise GeocodeDataError("Google Geocoding returned an unexpected body")
    status = data.get("status")
    results = data.get("results") or []
    if status != "OK" or not results:
        raise GeocodeLookupError(
            f"Google Geocoding failed: {status}",
            upstream_status=status,
        )

    try:
        result = results[0]
        location = (result.get("geometry") or {}).get("location") or {}
        lat = location.get("lat")
        lng = location.get("lng")
        town, state = extract_town_and_state(result.get("address_components"))
    except (AttributeError, KeyError, TypeError, IndexError) as e:
        raise GeocodeDataError(f"Malformed geocoding result: {e}") from e

    if not (_is_number(lat) and _is_number(lng)):
        raise GeocodeDataError()
    return GeoResult(latitude=float(lat), longitude=float(lng), town=town, state=state)


class GeocoderClient:
    """Looks up US ZIP codes against the Google Geocoding API."""

    def __init__(
        self,
        *,
        api_key: Optional[str],
        http_client: httpx.AsyncClient,
        url: str = DEFAULT_GEOCODING_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.api_key = (api_key or "").strip()
        self.http_client = http_client
        self.url = url
        self.timeout = timeout

    async def geocode_zip(self, zip_code: str) -> GeoResult:
        if not self.api_key:
            raise GeocodeConfigError("Missing GOOGLE_GEOCODING_API_KEY")

        params: Dict[str, str] = {"address": f"{zip_code}, USA", "key": self.api_key}
        try:
            response = await self.http_client.get(self.url, params=params, timeout=self.timeout)
        except httpx.TimeoutException as e:
            raise GeocodeNetworkError(f"Google Geocoding timed out: {e}") from e
        except httpx.RequestError as e:
            raise GeocodeNetworkError(f"Google Geocoding request failed: {e}") from e

        if not response.is_success:
            raise GeocodeNetworkError(
                f"Google Geocoding HTTP error: {response.status_code}",
                http_status=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise GeocodeDataError("Google Geocoding returned a non-JSON body") from e

        return parse_geocode_response(data)
