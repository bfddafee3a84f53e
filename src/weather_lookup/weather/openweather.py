"""OpenWeather current weather provider."""

from __future__ import annotations

from typing import Any

from ..models import WeatherInfo
from .base import WeatherProvider
from .http import request_json

# OpenWeather reports hPa; WeatherInfo carries Pascal.
_HECTOPASCAL_TO_PASCAL = 100


class OpenWeatherProvider(WeatherProvider):
    """Fetches current conditions from the OpenWeather Current Weather API in one request."""

    provider_name = "OpenWeather"

    def get_weather(self, address: str, date: str | None = None) -> WeatherInfo:
        payload = request_json(
            self._client,
            self.settings.openweather_api_url,
            params={"units": "metric", "q": address, "appid": self.api_key},
            context="OpenWeather current weather",
            logger=self.logger,
        )
        return self._normalize(self._as_dict(payload))

    def _normalize(self, payload: dict[str, Any]) -> WeatherInfo:
        main = self._as_dict(payload.get("main"))
        pressure_hpa = self._as_int(main.get("pressure"))
        return WeatherInfo(
            description=self._describe(payload.get("weather")),
            temperature_celsius=self._as_float(main.get("temp")),
            humidity_percent=self._as_int(main.get("humidity")),
            pressure_pascal=(
                pressure_hpa * _HECTOPASCAL_TO_PASCAL if pressure_hpa is not None else None
            ),
        )

    def _describe(self, weather: Any) -> str | None:
        # Labels are concatenated as-is, without a separator.
        if not isinstance(weather, list) or not weather:
            return None
        return "".join(self._as_str(self._as_dict(item).get("main")) or "" for item in weather)
