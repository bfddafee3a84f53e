"""Weather client dispatching lookups to the provider matching a record's kind."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..config import Settings
from ..models import ProviderKind, ProviderRecord, WeatherInfo
from .accuweather import AccuWeatherProvider
from .base import WeatherProvider
from .openweather import OpenWeatherProvider

PROVIDER_TYPES: dict[ProviderKind, type[WeatherProvider]] = {
    "OpenWeather": OpenWeatherProvider,
    "AccuWeather": AccuWeatherProvider,
}


class WeatherClient:
    """Owns the HTTP session and builds a provider per lookup."""

    def __init__(
        self,
        settings: Settings,
        logger: logging.Logger,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.settings = settings
        self.logger = logger
        self._client = http_client or httpx.Client(
            timeout=settings.weather_timeout_seconds,
            follow_redirects=True,
            headers={
                "Accept": "application/json",
                "User-Agent": settings.user_agent,
            },
        )

    def __enter__(self) -> WeatherClient:
        return self

    def __exit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def make_provider(self, record: ProviderRecord) -> WeatherProvider:
        provider_type = PROVIDER_TYPES[record.kind]
        return provider_type(
            api_key=record.api_key,
            http_client=self._client,
            settings=self.settings,
            logger=self.logger,
        )

    def get_weather(
        self, record: ProviderRecord, address: str, date: str | None = None
    ) -> WeatherInfo:
        """Look up current weather for `address` with the record's provider."""
        provider = self.make_provider(record)
        self.logger.info(
            "Fetching weather via provider '%s' (%s)", record.name, provider.provider_name
        )
        return provider.get_weather(address, date)
