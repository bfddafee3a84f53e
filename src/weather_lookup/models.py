"""Shared typed models for provider records and weather lookups."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ProviderKind = Literal["OpenWeather", "AccuWeather"]

# Command-line slugs for each provider kind.
PROVIDER_KIND_SLUGS: dict[str, ProviderKind] = {
    "open-weather": "OpenWeather",
    "accu-weather": "AccuWeather",
}


class ProviderRecord(BaseModel):
    """Named provider credentials persisted in the providers file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(min_length=1, description="Unique user-chosen provider name")
    kind: ProviderKind = Field(alias="provider", description="Weather API this record targets")
    api_key: str = Field(min_length=1, repr=False, description="Opaque provider API key")


class WeatherInfo(BaseModel):
    """Normalized current conditions; providers fill in whatever they supply."""

    description: str | None = None
    temperature_celsius: float | None = None
    humidity_percent: int | None = None
    pressure_pascal: int | None = None
