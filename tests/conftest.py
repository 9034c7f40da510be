"""Test configuration and fixtures."""

from collections.abc import Callable
from io import StringIO

import httpx
import pytest
import structlog
from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient
from rich.console import Console

from weather_console.services.client import WeatherApiClient
from weather_console.services.weather import WeatherService

API_URL = "http://weather.test/data/2.5/weather"
API_KEY = "test-key"


@pytest.fixture
def mock_weather_response():
    """Current conditions payload for Traverse City, MI."""
    return {
        "coord": {"lon": -85.62, "lat": 44.76},
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
        "base": "stations",
        "main": {
            "temp": 283.15,
            "feels_like": 281.86,
            "temp_min": 281.48,
            "temp_max": 284.82,
            "pressure": 1018,
            "humidity": 87,
        },
        "visibility": 10000,
        "wind": {"speed": 2.06, "deg": 350},
        "clouds": {"all": 1},
        "dt": 1697716800,
        "sys": {"country": "US"},
        "timezone": -14400,
        "id": 5012495,
        "name": "Traverse City",
        "cod": 200,
    }


@pytest.fixture
def unauthorized_response():
    return {
        "cod": 401,
        "message": "Invalid API key. Please see https://openweathermap.org/faq#error401 for more info.",
    }


@pytest.fixture
def make_service() -> Callable[[Callable[[httpx.Request], httpx.Response]], WeatherService]:
    """Build a weather service whose HTTP traffic goes to ``handler``."""

    def factory(handler):
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        return WeatherService(WeatherApiClient(http_client, base_url=API_URL, api_key=API_KEY))

    return factory


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def service(make_service, recorded_requests, mock_weather_response):
    """Service backed by a mock transport that records requests and answers 200."""

    def handler(request: httpx.Request) -> httpx.Response:
        recorded_requests.append(request)
        return httpx.Response(200, json=mock_weather_response)

    return make_service(handler)


def build_fixture_server(payload: dict, valid_key: str = API_KEY) -> FastAPI:
    """Stand-in for the provider's current conditions endpoint."""
    server = FastAPI()

    @server.get("/data/2.5/weather")
    def current_weather(
        appid: str = "",
        zip: int | None = Query(default=None),
        lat: float | None = None,
        lon: float | None = None,
    ):
        if appid != valid_key:
            return JSONResponse(
                status_code=401,
                content={"cod": 401, "message": "Invalid API key."},
            )
        if zip is None and (lat is None or lon is None):
            return JSONResponse(
                status_code=400,
                content={"cod": "400", "message": "Nothing to geocode"},
            )
        return payload

    return server


@pytest.fixture
def fixture_server_client(mock_weather_response):
    with TestClient(build_fixture_server(mock_weather_response), base_url="http://weather.test") as client:
        yield client


@pytest.fixture
def console_output() -> StringIO:
    return StringIO()


@pytest.fixture
def console(console_output) -> Console:
    """Plain, wide, non-interactive console that writes to ``console_output``."""
    return Console(file=console_output, width=160, color_system=None, force_terminal=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()
