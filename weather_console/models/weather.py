"""Pydantic models for weather queries, payloads and results."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CoordinatesQuery(BaseModel):
    """Location given by longitude and latitude."""

    model_config = ConfigDict(frozen=True)

    longitude: float
    latitude: float

    def to_params(self) -> dict[str, float]:
        return {"lat": self.latitude, "lon": self.longitude}


class PostalCodeQuery(BaseModel):
    """Location given by postal (zip) code."""

    model_config = ConfigDict(frozen=True)

    postal_code: int

    def to_params(self) -> dict[str, int]:
        return {"zip": self.postal_code}


LocationQuery = CoordinatesQuery | PostalCodeQuery


class Coordinates(BaseModel):
    """Geographic coordinates as returned by the provider."""

    model_config = ConfigDict(frozen=True)

    lon: float = 0.0
    lat: float = 0.0


class MainConditions(BaseModel):
    """Temperature and humidity block (``main``)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    temperature_kelvin: float = Field(default=0.0, alias="temp")
    humidity_percent: float = Field(default=0.0, alias="humidity")


class Wind(BaseModel):
    """Wind block (``wind``)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    speed_meters_per_second: float = Field(default=0.0, alias="speed")
    direction_degrees: float = Field(default=0.0, alias="deg")


class WeatherRecord(BaseModel):
    """Current weather observation decoded from the provider payload.

    Numeric values are kept exactly as the provider sent them. Missing
    sections fall back to zeroed defaults, so an error body such as
    ``{"cod": 401, "message": "..."}`` still decodes.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str = Field(default="", description="Resolved location name")
    coordinates: Coordinates = Field(default_factory=Coordinates, alias="coord")
    main: MainConditions = Field(default_factory=MainConditions)
    wind: Wind = Field(default_factory=Wind)
    cod: int | str | None = Field(default=None, description="Provider status code")
    message: str | None = Field(default=None, description="Provider error message")


class ResponseStatus(str, Enum):
    """Outcome of a single request attempt."""

    COMPLETE = "complete"
    TRANSPORT_ERROR = "transport_error"
    UNAUTHORIZED = "unauthorized"
    BAD_REQUEST = "bad_request"


class WeatherResult(BaseModel):
    """Record and status of one request.

    The record is returned even under an error status (it may be a
    default record decoded from an error body), so callers check
    ``status`` before trusting it. ``decode_error`` is set when the body
    could not be decoded at all, in which case ``record`` is None.
    """

    model_config = ConfigDict(frozen=True)

    record: WeatherRecord | None = None
    status: ResponseStatus
    http_status: int | None = None
    decode_error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is ResponseStatus.COMPLETE and self.record is not None


class LocationInformation(BaseModel):
    """Identity of the location behind the most recent successful query."""

    model_config = ConfigDict(frozen=True)

    name: str
    postal_code: int | None = None
    coordinates: Coordinates

    @classmethod
    def from_result(cls, query: LocationQuery, record: WeatherRecord) -> "LocationInformation":
        """Build location info for ``query`` from the decoded ``record``.

        Coordinate queries keep the coordinates the user entered; postal
        code queries take the coordinates the provider resolved.
        """
        if isinstance(query, CoordinatesQuery):
            return cls(
                name=record.name,
                coordinates=Coordinates(lon=query.longitude, lat=query.latitude),
            )
        return cls(
            name=record.name,
            postal_code=query.postal_code,
            coordinates=record.coordinates,
        )
