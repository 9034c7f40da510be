"""Application configuration using Pydantic settings."""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Application
    app_name: str = "Weather Console"
    app_version: str = "1.0.0"

    # Weather API
    openweather_api_key: str = ""
    weather_api_url: str = "https://api.openweathermap.org/data/2.5/weather"
    weather_api_units: str = "standard"  # Kelvin and m/s

    # Logging
    log_level: LogLevel = "WARNING"
    log_json: bool = False

    # Console theme
    theme_foreground: str = "white"
    theme_background: str = "blue"
    theme_banner_foreground: str = "black"
    theme_banner_background: str = "cyan"
    theme_error: str = "bold red"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


settings = Settings()
