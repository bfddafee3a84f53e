"""Typed settings loader and providers file location."""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError

PROVIDERS_FILE_NAME = ".weather_providers.data"


def resolve_providers_path(home: Path | None, temp_dir: Path) -> Path:
    """Return the providers file path for the given home and temp directories.

    The home directory wins when known; otherwise the file lives in the temp
    directory.
    """
    base = home if home is not None else temp_dir
    return base / PROVIDERS_FILE_NAME


def _home_dir() -> Path | None:
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


class Settings(BaseSettings):
    """Application settings loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    providers_file: Path | None = Field(default=None, alias="WEATHER_PROVIDERS_FILE")
    weather_timeout_seconds: float = Field(default=15.0, alias="WEATHER_TIMEOUT_SECONDS")
    log_level: str = Field(default="WARNING", alias="WEATHER_LOG_LEVEL")
    user_agent: str = Field(default="weather-lookup/0.1", alias="WEATHER_USER_AGENT")

    openweather_api_url: str = Field(
        default="https://api.openweathermap.org/data/2.5/weather",
        alias="OPENWEATHER_API_URL",
    )
    accuweather_location_api_url: str = Field(
        default="http://dataservice.accuweather.com/locations/v1/cities/search",
        alias="ACCUWEATHER_LOCATION_API_URL",
    )
    accuweather_conditions_api_url: str = Field(
        default="http://dataservice.accuweather.com/currentconditions/v1",
        alias="ACCUWEATHER_CONDITIONS_API_URL",
    )

    @field_validator("weather_timeout_seconds")
    @classmethod
    def _validate_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("WEATHER_TIMEOUT_SECONDS must be > 0.")
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"WEATHER_LOG_LEVEL '{value}' is not a logging level name.")
        return level

    def resolve_providers_path(self) -> Path:
        """Return the configured providers file, or the per-user default location."""
        if self.providers_file is not None:
            return self.providers_file.expanduser()
        return resolve_providers_path(_home_dir(), Path(tempfile.gettempdir()))


def load_settings() -> Settings:
    """Load and validate settings, raising ConfigError on failure."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed reading environment/.env: {exc}") from exc
