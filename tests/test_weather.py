"""Tests for the weather service facade."""

import httpx
import pytest

from tests.conftest import API_URL
from weather_console.models.weather import ResponseStatus
from weather_console.services.client import WeatherApiClient
from weather_console.services.weather import WeatherService


@pytest.mark.parametrize(
    "longitude,latitude",
    [(-85.62, 44.76), (0.0, 0.0), (151.2093, -33.8688), (-180.0, 90.0)],
)
def test_get_weather_by_coordinates_params(service, recorded_requests, longitude, latitude):
    """Test coordinate lookups send exactly lat/lon and no zip."""
    result = service.get_weather_by_coordinates(longitude, latitude)

    assert result.status is ResponseStatus.COMPLETE
    params = recorded_requests[0].url.params
    assert float(params["lat"]) == latitude
    assert float(params["lon"]) == longitude
    assert "zip" not in params


@pytest.mark.parametrize("postal_code", [49686, 10001, 501, 99950])
def test_get_weather_by_postal_code_params(service, recorded_requests, postal_code):
    """Test postal code lookups send exactly zip and no lat/lon."""
    result = service.get_weather_by_postal_code(postal_code)

    assert result.status is ResponseStatus.COMPLETE
    params = recorded_requests[0].url.params
    assert int(params["zip"]) == postal_code
    assert "lat" not in params
    assert "lon" not in params


def test_each_call_issues_one_request(service, recorded_requests):
    service.get_weather_by_postal_code(49686)
    service.get_weather_by_coordinates(-85.62, 44.76)

    assert len(recorded_requests) == 2


def test_get_weather_rejects_unknown_query(service):
    with pytest.raises(TypeError):
        service.get_weather({"zip": 49686})


def test_zip_end_to_end_complete(fixture_server_client):
    """Test zip 49686 against a fixture server answering 200."""
    service = WeatherService(WeatherApiClient(fixture_server_client, base_url=API_URL, api_key="test-key"))

    result = service.get_weather_by_postal_code(49686)

    assert result.status is ResponseStatus.COMPLETE
    assert result.ok
    assert result.record.name


def test_zip_end_to_end_unauthorized(fixture_server_client):
    """Test a rejected key yields Unauthorized and a safe record."""
    service = WeatherService(WeatherApiClient(fixture_server_client, base_url=API_URL, api_key="wrong-key"))

    result = service.get_weather_by_postal_code(49686)

    assert result.status is ResponseStatus.UNAUTHORIZED
    assert not result.ok
    assert result.record.name == ""
    assert result.record.main.temperature_kelvin == 0.0


def test_coordinates_end_to_end_complete(fixture_server_client):
    service = WeatherService(WeatherApiClient(fixture_server_client, base_url=API_URL, api_key="test-key"))

    result = service.get_weather_by_coordinates(-85.62, 44.76)

    assert result.status is ResponseStatus.COMPLETE
    assert result.record.coordinates.lat == 44.76


def test_transport_error_end_to_end(make_service):
    """Test an unreachable host yields TransportError."""

    def handler(request):
        raise httpx.ConnectError("Connection refused", request=request)

    with make_service(handler) as service:
        result = service.get_weather_by_postal_code(49686)

    assert result.status is ResponseStatus.TRANSPORT_ERROR
    assert result.record is None
