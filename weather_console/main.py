"""Console application entry point."""

import sys

from weather_console.core.config import settings
from weather_console.core.logging import configure_logging, get_logger
from weather_console.presentation.console import WeatherConsole
from weather_console.services.weather import WeatherService

logger = get_logger(__name__)


def main() -> int:
    """Run the interactive weather console."""
    configure_logging()
    logger.info("application_starting", version=settings.app_version)

    if not settings.openweather_api_key:
        logger.warning("api_key_missing", hint="set OPENWEATHER_API_KEY")

    with WeatherService() as service:
        try:
            WeatherConsole(service, settings).run()
        except (KeyboardInterrupt, EOFError):
            logger.info("application_interrupted")

    logger.info("application_stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
