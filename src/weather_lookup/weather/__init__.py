"""Weather provider integrations."""

from .accuweather import AccuWeatherProvider
from .base import WeatherProvider
from .client import WeatherClient
from .openweather import OpenWeatherProvider

__all__ = [
    "AccuWeatherProvider",
    "OpenWeatherProvider",
    "WeatherClient",
    "WeatherProvider",
]
