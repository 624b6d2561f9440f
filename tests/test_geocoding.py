import httpx
import pytest

from hoyalist.core.exceptions import (
    GeocodeConfigError,
    GeocodeDataError,
    GeocodeLookupError,
    GeocodeNetworkError,
)
from hoyalist.services.geocoding import extract_town_and_state, parse_geocode_response

from conftest import HARTFORD_RESPONSE, GeocodeStub, make_geocoder


def _result(components, lat=51.5, lng=-0.12):
    return {
        "status": "OK",
        "results": [{"address_components": components, "geometry": {"location": {"lat": lat, "lng": lng}}}],
    }


def test_parse_hartford():
    geo = parse_geocode_response(HARTFORD_RESPONSE)
    assert geo.latitude == pytest.approx(41.7626)
    assert geo.longitude == pytest.approx(-72.7175)
    assert geo.town == "Hartford"
    assert geo.state == "CT"


def test_postal_town_fallback():
    town, state = extract_town_and_state([
        {"long_name": "London", "short_name": "London", "types": ["postal_town"]},
        {"long_name": "England", "short_name": "England", "types": ["administrative_area_level_1"]},
    ])
    assert town == "London"
    assert state == "England"


def test_locality_preferred_over_postal_town():
    town, _ = extract_town_and_state([
        {"long_name": "Postal", "types": ["postal_town"]},
        {"long_name": "Local", "types": ["locality"]},
    ])
    assert town == "Local"


def test_missing_town_and_state_is_not_an_error():
    geo = parse_geocode_response(_result([{"long_name": "US", "types": ["country"]}]))
    assert geo.town == ""
    assert geo.state == ""


def test_integer_coordinates_accepted():
    geo = parse_geocode_response(_result([], lat=41, lng=-72))
    assert geo.latitude == 41.0
    assert geo.longitude == -72.0


@pytest.mark.parametrize("status", ["ZERO_RESULTS", "REQUEST_DENIED", "OVER_QUERY_LIMIT"])
def test_non_ok_status(status):
    with pytest.raises(GeocodeLookupError) as exc_info:
        parse_geocode_response({"status": status, "results": []})
    assert exc_info.value.upstream_status == status


def test_ok_without_results():
    with pytest.raises(GeocodeLookupError) as exc_info:
        parse_geocode_response({"status": "OK", "results": []})
    assert exc_info.value.upstream_status == "OK"


@pytest.mark.parametrize(
    "location",
    [{}, {"lat": "41.7", "lng": "-72.7"}, {"lat": 41.7}, {"lat": None, "lng": -72.7}, {"lat": True, "lng": False}],
)
def test_non_numeric_coordinates(location):
    body = {"status": "OK", "results": [{"geometry": {"location": location}, "address_components": []}]}
    with pytest.raises(GeocodeDataError):
        parse_geocode_response(body)


@pytest.mark.parametrize(
    "body",
    [
        {"status": "OK", "results": {"a": 1}},
        {"status": "OK", "results": ["x"]},
        {"status": "OK", "results": [{"geometry": "nowhere"}]},
        {"status": "OK", "results": [{"geometry": {"location": [41.7, -72.7]}}]},
        {"status": "OK", "results": [{"geometry": {"location": {"lat": 41.7, "lng": -72.7}}, "address_components": [None]}]},
        {"status": "OK", "results": [{"geometry": {"location": {"lat": 41.7, "lng": -72.7}}, "address_components": 7}]},
    ],
)
def test_malformed_result_shape(body):
    with pytest.raises(GeocodeDataError):
        parse_geocode_response(body)


@pytest.mark.asyncio
async def test_geocode_zip_request_shape():
    stub = GeocodeStub()
    geo = await make_geocoder(stub, api_key="secret-key").geocode_zip("06119")

    assert geo.town == "Hartford"
    assert len(stub.requests) == 1
    request = stub.requests[0]
    assert request.method == "GET"
    assert request.url.host == "maps.googleapis.com"
    assert request.url.params["address"] == "06119, USA"
    assert request.url.params["key"] == "secret-key"


@pytest.mark.asyncio
@pytest.mark.parametrize("api_key", [None, "", "   "])
async def test_missing_api_key_sends_nothing(api_key):
    stub = GeocodeStub()
    with pytest.raises(GeocodeConfigError):
        await make_geocoder(stub, api_key=api_key).geocode_zip("06119")
    assert stub.requests == []


@pytest.mark.asyncio
async def test_http_error_status():
    stub = GeocodeStub(status_code=503, payload={"error": "unavailable"})
    with pytest.raises(GeocodeNetworkError) as exc_info:
        await make_geocoder(stub).geocode_zip("06119")
    assert exc_info.value.http_status == 503
    assert "503" in exc_info.value.message


@pytest.mark.asyncio
async def test_transport_failure():
    stub = GeocodeStub(exc=httpx.ConnectError("connection refused"))
    with pytest.raises(GeocodeNetworkError) as exc_info:
        await make_geocoder(stub).geocode_zip("06119")
    assert exc_info.value.http_status is None


@pytest.mark.asyncio
async def test_timeout():
    stub = GeocodeStub(exc=httpx.ReadTimeout("timed out"))
    with pytest.raises(GeocodeNetworkError):
        await make_geocoder(stub).geocode_zip("06119")


@pytest.mark.asyncio
async def test_upstream_denied():
    stub = GeocodeStub(payload={"status": "REQUEST_DENIED", "results": []})
    with pytest.raises(GeocodeLookupError) as exc_info:
        await make_geocoder(stub).geocode_zip("06119")
    assert exc_info.value.upstream_status == "REQUEST_DENIED"
