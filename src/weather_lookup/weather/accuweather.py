"""AccuWeather current conditions provider (location search, then conditions)."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from ..exceptions import WeatherLookupError
from ..models import WeatherInfo
from .base import WeatherProvider
from .http import request_json


class AccuWeatherProvider(WeatherProvider):
    """Resolves an address to a location key and fetches its current conditions."""

    provider_name = "AccuWeather"

    def get_weather(self, address: str, date: str | None = None) -> WeatherInfo:
        location_key = self._resolve_location_key(address)
        conditions = request_json(
            self._client,
            f"{self.settings.accuweather_conditions_api_url.rstrip('/')}/"
            f"{quote(location_key, safe='')}",
            params={"apikey": self.api_key},
            context="AccuWeather current conditions",
            logger=self.logger,
        )
        condition = self._first(conditions)
        if condition is None:
            raise WeatherLookupError("No weather condition received")
        condition = self._as_dict(condition)

        metric = self._as_dict(self._as_dict(condition.get("Temperature")).get("Metric"))
        return WeatherInfo(
            description=self._as_str(condition.get("WeatherText")),
            temperature_celsius=self._as_float(metric.get("Value")),
        )

    def _resolve_location_key(self, address: str) -> str:
        locations = request_json(
            self._client,
            self.settings.accuweather_location_api_url,
            params={"apikey": self.api_key, "q": address},
            context="AccuWeather location search",
            logger=self.logger,
        )
        location_key = self._as_str(self._as_dict(self._first(locations)).get("Key"))
        if location_key is None:
            self.logger.info("AccuWeather found no location for the requested address")
            raise WeatherLookupError("Unknown location")
        return location_key

    @staticmethod
    def _first(payload: Any) -> Any:
        if isinstance(payload, list) and payload:
            return payload[0]
        return None
