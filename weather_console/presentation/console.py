"""Interactive console menu for weather lookups."""

from typing import TextIO

from pydantic import BaseModel, ConfigDict
from rich.console import Console
from rich.panel import Panel
from rich.prompt import FloatPrompt, IntPrompt, Prompt
from rich.text import Text
from rich.theme import Theme

from weather_console.core.config import Settings
from weather_console.core.logging import get_logger
from weather_console.models.weather import (
    CoordinatesQuery,
    LocationInformation,
    LocationQuery,
    PostalCodeQuery,
    ResponseStatus,
    WeatherRecord,
    WeatherResult,
)
from weather_console.presentation import converters
from weather_console.services.weather import WeatherService

logger = get_logger(__name__)

ERROR_MESSAGES = {
    ResponseStatus.TRANSPORT_ERROR: "An error occurred in the request: network is down, failed DNS lookup, etc",
    ResponseStatus.UNAUTHORIZED: "An error occurred in the request: key is unauthorized",
    ResponseStatus.BAD_REQUEST: "An error occurred in the request: the request was malformed",
}
DECODE_ERROR_MESSAGE = "An error occurred in the request: the response could not be read"


class ConsoleTheme(BaseModel):
    """Colors for the application and welcome/closing screens."""

    model_config = ConfigDict(frozen=True)

    foreground: str = "white"
    background: str = "blue"
    banner_foreground: str = "black"
    banner_background: str = "cyan"
    error: str = "bold red"

    @classmethod
    def from_settings(cls, config: Settings) -> "ConsoleTheme":
        return cls(
            foreground=config.theme_foreground,
            background=config.theme_background,
            banner_foreground=config.theme_banner_foreground,
            banner_background=config.theme_banner_background,
            error=config.theme_error,
        )

    def to_rich(self) -> Theme:
        return Theme(
            {
                "app": f"{self.foreground} on {self.background}",
                "header": f"bold {self.foreground} on {self.background}",
                "banner": f"{self.banner_foreground} on {self.banner_background}",
                "error": self.error,
            }
        )


class WeatherConsole:
    """Menu loop that queries the weather service and renders results.

    Holds the record and location of the most recent successful query;
    both are dropped when the next query starts.
    """

    def __init__(
        self,
        service: WeatherService,
        config: Settings,
        console: Console | None = None,
        theme: ConsoleTheme | None = None,
        input_stream: TextIO | None = None,
    ):
        self.service = service
        self.config = config
        self.theme = theme or ConsoleTheme.from_settings(config)
        self.console = console or Console()
        self.console.push_theme(self.theme.to_rich())
        self.input_stream = input_stream
        self.weather_record: WeatherRecord | None = None
        self.location_information: LocationInformation | None = None

    def run(self) -> None:
        """Welcome screen, main menu until quit, closing screen."""
        self.display_welcome_screen()
        self.display_main_menu()
        self.display_closing_screen()

    def display_main_menu(self) -> None:
        while True:
            self.display_header("Main Menu")
            self.console.print("A. Get Weather Data by Longitude and Latitude", style="app")
            self.console.print("B. Get Weather Data by Zip Code", style="app")
            self.console.print("C. Display Weather Data Short Format", style="app")
            self.console.print("Q. Quit", style="app")
            self.console.print()

            choice = Prompt.ask(
                "Enter Menu Choice", console=self.console, stream=self.input_stream
            ).strip().lower()

            if choice == "a":
                self.display_get_weather_by_coordinates()
            elif choice == "b":
                self.display_get_weather_by_postal_code()
            elif choice == "c":
                self.display_weather_short_format()
            elif choice == "q":
                return
            else:
                self.console.print("Please make a selection A-C or Q.", style="app")
                self.display_continue_prompt()

    def display_get_weather_by_coordinates(self) -> WeatherResult:
        self.display_header("Weather by Longitude and Latitude")
        longitude = FloatPrompt.ask("Enter Longitude", console=self.console, stream=self.input_stream)
        latitude = FloatPrompt.ask("Enter Latitude", console=self.console, stream=self.input_stream)

        return self._acquire(
            CoordinatesQuery(longitude=longitude, latitude=latitude),
            f"Longitude:{converters.format_decimal(longitude)} "
            f"and Latitude:{converters.format_decimal(latitude)}",
        )

    def display_get_weather_by_postal_code(self) -> WeatherResult:
        self.display_header("Weather by Zip Code")
        postal_code = IntPrompt.ask("Enter Zip Code", console=self.console, stream=self.input_stream)

        return self._acquire(PostalCodeQuery(postal_code=postal_code), f"Zip Code:{postal_code}")

    def _acquire(self, query: LocationQuery, description: str) -> WeatherResult:
        self.weather_record = None
        self.location_information = None

        result = self.service.get_weather(query)

        if result.ok:
            self.weather_record = result.record
            self.location_information = LocationInformation.from_result(query, result.record)
            self.console.print(f"Weather data for {description} acquired.", style="app", highlight=False)
        else:
            logger.info("weather_query_failed", status=result.status.value, decode_error=result.decode_error)
            self.display_error(result)

        self.display_continue_prompt()
        return result

    def display_weather_short_format(self) -> None:
        self.display_header("Current Weather Data")

        record = self.weather_record
        location = self.location_information
        if record is None or location is None:
            self.console.print("No weather data yet. Choose A or B first.", style="app")
            self.display_continue_prompt()
            return

        lines = [f"Weather Data for {location.name}"]
        if location.postal_code is not None:
            lines.append(f"Zip Code: {location.postal_code}")
        lines.append(f"Longitude: {converters.format_decimal(location.coordinates.lon)}")
        lines.append(f"Latitude: {converters.format_decimal(location.coordinates.lat)}")
        lines.append(converters.format_coordinates(record.coordinates.lon, record.coordinates.lat))
        lines.append("")
        lines.append(f"Temperature: {converters.format_fahrenheit(record.main.temperature_kelvin)}")
        lines.append(f"Humidity: {converters.format_humidity(record.main.humidity_percent)}")
        lines.append(
            f"Wind: {converters.format_mph(record.wind.speed_meters_per_second)} "
            f"{converters.format_wind_direction(record.wind.direction_degrees)}"
        )

        for line in lines:
            self.console.print(line, style="app", highlight=False, markup=False)
        self.display_continue_prompt()

    def error_message(self, result: WeatherResult) -> str:
        """User-facing message for a failed result."""
        if result.status is ResponseStatus.COMPLETE:
            return DECODE_ERROR_MESSAGE

        message = ERROR_MESSAGES[result.status]
        if result.record is not None and result.record.message:
            message += f" ({result.record.message})"
        return message

    def display_error(self, result: WeatherResult) -> None:
        self.console.print(Panel(Text(self.error_message(result)), style="error"))

    def display_welcome_screen(self) -> None:
        self.console.clear()
        self.console.print()
        self.console.print(self.config.app_name, style="banner")
        self.console.print()
        self.display_continue_prompt()

    def display_closing_screen(self) -> None:
        self.console.clear()
        self.console.print()
        self.console.print("Thank you for using the weather console.", style="banner")
        self.display_continue_prompt()

    def display_header(self, header_text: str) -> None:
        self.console.clear()
        self.console.print()
        self.console.print(header_text, style="header", highlight=False)
        self.console.print()

    def display_continue_prompt(self) -> None:
        self.console.print()
        self.console.input("Press Enter to continue.", stream=self.input_stream)
