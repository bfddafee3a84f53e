"""Storage-agnostic provider record contract."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..models import ProviderRecord


class ProviderStore(ABC):
    """Base contract for provider record stores used by the processor."""

    @abstractmethod
    def list_all(self) -> list[ProviderRecord]:
        """Return every stored record in storage order."""

    @abstractmethod
    def get(self, name: str) -> ProviderRecord:
        """Return the record named `name` or raise NotFoundError."""

    @abstractmethod
    def add(self, record: ProviderRecord) -> None:
        """Append a record; name uniqueness is the caller's concern."""

    @abstractmethod
    def remove(self, name: str) -> None:
        """Delete the record named `name` or raise NotFoundError."""
