"""Parsed command values handed from the CLI to the processor."""

from __future__ import annotations

from dataclasses import dataclass

from .models import ProviderRecord


@dataclass(frozen=True, slots=True)
class ProviderAdd:
    record: ProviderRecord


@dataclass(frozen=True, slots=True)
class ProviderRemove:
    name: str


@dataclass(frozen=True, slots=True)
class ProviderShow:
    """Show one provider by name, or every provider when `name` is None."""

    name: str | None = None


@dataclass(frozen=True, slots=True)
class GetWeather:
    address: str
    provider_name: str
    # Accepted and forwarded to providers; current conditions ignore it.
    date: str | None = None


Command = ProviderAdd | ProviderRemove | ProviderShow | GetWeather
