"""Application exception classes."""

from __future__ import annotations


class ConfigError(Exception):
    """Raised when configuration is invalid or incomplete."""


class ProviderStoreError(Exception):
    """Base class for provider record store and provider command failures."""


class NotFoundError(ProviderStoreError):
    """Raised when no provider record has the requested name."""


class AlreadyExistsError(ProviderStoreError):
    """Raised when adding a provider whose name is already taken."""


class StorageIOError(ProviderStoreError):
    """Raised when the providers file cannot be read or written."""


class StorageFormatError(ProviderStoreError):
    """Raised when the providers file does not hold valid provider records."""


class WeatherProviderError(Exception):
    """Raised when weather provider requests or normalization fail."""


class WeatherLookupError(WeatherProviderError):
    """Raised when a provider cannot resolve the location or its conditions."""


class RequestError(WeatherProviderError):
    """Raised for HTTP status or transport failures, with optional status metadata."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ResponseParseError(WeatherProviderError):
    """Raised when a provider response body cannot be decoded."""
