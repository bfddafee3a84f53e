"""Command processor and the dependency factory it draws collaborators from."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from rich.console import Console
from rich.markup import escape

from .commands import Command, GetWeather, ProviderAdd, ProviderRemove, ProviderShow
from .config import Settings
from .exceptions import AlreadyExistsError, NotFoundError, WeatherProviderError
from .models import ProviderRecord, WeatherInfo
from .redaction import sanitize_text
from .storage import FileProviderStore, ProviderStore
from .weather import WeatherClient

UNKNOWN = "unknown"


class DependencyFactory(ABC):
    """Supplies the store and weather client a processor works against."""

    @abstractmethod
    def make_store(self) -> ProviderStore:
        """Make the provider record store."""

    @abstractmethod
    def make_client(self) -> WeatherClient:
        """Make a weather client; callers close it when done."""


class ProductionDependencyFactory(DependencyFactory):
    """File-backed store and HTTP weather client."""

    def __init__(self, settings: Settings, logger: logging.Logger) -> None:
        self.settings = settings
        self.logger = logger
        self.providers_path = settings.resolve_providers_path()

    def make_store(self) -> ProviderStore:
        return FileProviderStore(self.providers_path, logger=self.logger)

    def make_client(self) -> WeatherClient:
        return WeatherClient(self.settings, logger=self.logger)


def format_weather(info: WeatherInfo) -> str:
    """Render weather info as plain text, spelling out missing values as unknown."""
    temperature = (
        f"{info.temperature_celsius:g} °C" if info.temperature_celsius is not None else UNKNOWN
    )
    humidity = f"{info.humidity_percent}%" if info.humidity_percent is not None else UNKNOWN
    pressure = f"{info.pressure_pascal} Pa" if info.pressure_pascal is not None else UNKNOWN
    return "\n".join(
        [
            info.description if info.description is not None else "unknown weather description",
            f"-> Temperature: {temperature}",
            f"-> Humidity: {humidity}",
            f"-> Pressure: {pressure}",
        ]
    )


def _print_records(console: Console, records: list[ProviderRecord]) -> None:
    # soft_wrap keeps long keys on one line so they can be copied from piped output.
    for index, record in enumerate(records):
        if index:
            console.print()
        console.print(f"Name: {escape(record.name)}", soft_wrap=True)
        console.print(f"Provider: {record.kind}", soft_wrap=True)
        console.print(f"API key: {escape(record.api_key)}", soft_wrap=True)


class Processor:
    """Runs one parsed command against the store and weather client.

    Provider command failures propagate to the caller. Weather retrieval
    failures in `get` are printed and swallowed, so the command still
    completes.
    """

    def __init__(
        self,
        dependency_factory: DependencyFactory,
        console: Console,
        logger: logging.Logger,
    ) -> None:
        self.dependency_factory = dependency_factory
        self.console = console
        self.logger = logger

    def run(self, command: Command) -> None:
        self.logger.debug("Running command", extra={"command": type(command).__name__})
        store = self.dependency_factory.make_store()

        if isinstance(command, ProviderAdd):
            self._add_provider(store, command.record)
        elif isinstance(command, ProviderRemove):
            store.remove(command.name)
            self.console.print(f"Successfully removed '{escape(command.name)}' provider")
        elif isinstance(command, ProviderShow):
            self._show_providers(store, command.name)
        elif isinstance(command, GetWeather):
            self._get_weather(store, command)
        else:
            raise TypeError(f"Unsupported command type {type(command).__name__}")

    def _add_provider(self, store: ProviderStore, record: ProviderRecord) -> None:
        try:
            existing = store.get(record.name)
        except NotFoundError:
            store.add(record)
            self.console.print(f"Successfully added '{escape(record.name)}' provider")
            return
        raise AlreadyExistsError(f"Provider '{existing.name}' already exists")

    def _show_providers(self, store: ProviderStore, name: str | None) -> None:
        if name is not None:
            record = store.get(name)
            _print_records(self.console, [record])
            return

        records = store.list_all()
        if records:
            _print_records(self.console, records)

    def _get_weather(self, store: ProviderStore, command: GetWeather) -> None:
        record = store.get(command.provider_name)

        with self.dependency_factory.make_client() as client:
            try:
                info = client.get_weather(record, command.address, command.date)
            except WeatherProviderError as exc:
                message = sanitize_text(str(exc))
                self.logger.warning(
                    "Weather lookup via provider '%s' failed: %s",
                    record.name,
                    message,
                    extra={"command": type(command).__name__, "provider": record.name},
                )
                self.console.print(escape(message))
                return

        self.console.print(escape(format_weather(info)))
