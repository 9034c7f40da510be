"""Weather service facade over the provider client."""

from weather_console.core.logging import get_logger
from weather_console.models.weather import (
    CoordinatesQuery,
    LocationQuery,
    PostalCodeQuery,
    WeatherResult,
)
from weather_console.services.client import WeatherApiClient

logger = get_logger(__name__)


class WeatherService:
    """Current weather lookups by coordinates or postal code."""

    def __init__(self, api_client: WeatherApiClient | None = None):
        self.api_client = api_client or WeatherApiClient()

    def close(self) -> None:
        """Close the underlying API client."""
        self.api_client.close()

    def __enter__(self) -> "WeatherService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def get_weather(self, query: LocationQuery) -> WeatherResult:
        """Get current weather for a location query.

        Args:
            query: Coordinates or postal code query

        Returns:
            Weather result

        Raises:
            TypeError: If ``query`` is not a supported query type
        """
        if not isinstance(query, (CoordinatesQuery, PostalCodeQuery)):
            raise TypeError(f"Unsupported location query: {type(query).__name__}")

        logger.info("weather_request", **query.model_dump())
        return self.api_client.execute(self.api_client.build_request(query))

    def get_weather_by_coordinates(self, longitude: float, latitude: float) -> WeatherResult:
        """Get current weather at ``longitude``/``latitude``."""
        return self.get_weather(CoordinatesQuery(longitude=longitude, latitude=latitude))

    def get_weather_by_postal_code(self, postal_code: int) -> WeatherResult:
        """Get current weather for a zip code."""
        return self.get_weather(PostalCodeQuery(postal_code=postal_code))
