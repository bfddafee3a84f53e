"""Provider-agnostic weather interface."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from ..config import Settings
from ..models import WeatherInfo


class WeatherProvider(ABC):
    """Base contract for one third-party current-conditions API."""

    provider_name: str = ""

    def __init__(
        self,
        api_key: str,
        http_client: httpx.Client,
        settings: Settings,
        logger: logging.Logger,
    ) -> None:
        self.api_key = api_key
        self.settings = settings
        self.logger = logger
        self._client = http_client

    @abstractmethod
    def get_weather(self, address: str, date: str | None = None) -> WeatherInfo:
        """Fetch and normalize current conditions for `address`."""

    @staticmethod
    def _as_str(value: Any) -> str | None:
        if isinstance(value, str):
            return value
        return None

    @staticmethod
    def _as_int(value: Any) -> int | None:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return None

    @staticmethod
    def _as_float(value: Any) -> float | None:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        return None

    @staticmethod
    def _as_dict(value: Any) -> dict[str, Any]:
        if isinstance(value, dict):
            return value
        return {}
