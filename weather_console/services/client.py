"""HTTP request execution and response status classification."""

from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from weather_console.core.config import settings
from weather_console.core.logging import get_logger
from weather_console.models.weather import (
    LocationQuery,
    ResponseStatus,
    WeatherRecord,
    WeatherResult,
)

logger = get_logger(__name__)


def classify_status(status_code: int | None, transport_failed: bool = False) -> ResponseStatus:
    """Map the outcome of an HTTP attempt to a response status.

    Checks are ordered and the first match wins: a transport failure
    overrides any status code.

    Args:
        status_code: HTTP status code, None when no response was received
        transport_failed: Whether the request failed below the HTTP layer

    Returns:
        Response status
    """
    if transport_failed or status_code is None:
        return ResponseStatus.TRANSPORT_ERROR
    if status_code == httpx.codes.UNAUTHORIZED:
        return ResponseStatus.UNAUTHORIZED
    if status_code == httpx.codes.BAD_REQUEST:
        return ResponseStatus.BAD_REQUEST
    return ResponseStatus.COMPLETE


class WeatherRequest(BaseModel):
    """Fully formed request for the current conditions endpoint."""

    model_config = ConfigDict(frozen=True)

    url: str
    params: dict[str, Any] = Field(default_factory=dict)
    api_key: str
    units: str

    def query_params(self) -> dict[str, Any]:
        return {**self.params, "appid": self.api_key, "units": self.units}


class WeatherApiClient:
    """Executes single requests against the weather provider."""

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        base_url: str | None = None,
        api_key: str | None = None,
        units: str | None = None,
    ):
        self.client = http_client or httpx.Client()
        self.base_url = base_url or settings.weather_api_url
        self.api_key = settings.openweather_api_key if api_key is None else api_key
        self.units = units or settings.weather_api_units

    def close(self) -> None:
        """Close HTTP client."""
        self.client.close()

    def __enter__(self) -> "WeatherApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def build_request(self, query: LocationQuery) -> WeatherRequest:
        """Shape a request for ``query``."""
        return WeatherRequest(
            url=self.base_url,
            params=query.to_params(),
            api_key=self.api_key,
            units=self.units,
        )

    def execute(self, request: WeatherRequest) -> WeatherResult:
        """Send one GET request and decode the body.

        Never raises for transport or HTTP failures; those come back as
        the result status. Decoding is attempted whatever the status.

        Args:
            request: Request to send

        Returns:
            Weather result
        """
        try:
            response = self.client.get(request.url, params=request.query_params())
        except httpx.RequestError as e:
            logger.error(
                "weather_transport_error",
                url=request.url,
                error_type=type(e).__name__,
                error=str(e),
            )
            return WeatherResult(status=classify_status(None, transport_failed=True))

        status = classify_status(response.status_code)
        record, decode_error = self._decode(response)

        logger.info(
            "weather_response",
            http_status=response.status_code,
            status=status.value,
            decoded=record is not None,
        )
        if status is not ResponseStatus.COMPLETE:
            logger.warning(
                "weather_request_rejected",
                http_status=response.status_code,
                status=status.value,
                message=record.message if record else None,
            )

        return WeatherResult(
            record=record,
            status=status,
            http_status=response.status_code,
            decode_error=decode_error,
        )

    def _decode(self, response: httpx.Response) -> tuple[WeatherRecord | None, str | None]:
        try:
            return WeatherRecord.model_validate(response.json()), None
        except ValidationError as e:
            error = f"invalid weather payload: {e.error_count()} error(s)"
        except (ValueError, RecursionError) as e:
            error = f"invalid JSON body: {type(e).__name__}: {e}"

        logger.warning("weather_decode_failed", http_status=response.status_code, error=error)
        return None, error
