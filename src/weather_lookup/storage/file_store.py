"""JSON file backed provider record store."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ..exceptions import NotFoundError, StorageFormatError, StorageIOError
from ..models import ProviderRecord
from ..redaction import sanitize_for_logging
from .base import ProviderStore

_RECORDS_ADAPTER = TypeAdapter(list[ProviderRecord])


class FileProviderStore(ProviderStore):
    """Keeps every provider record in one JSON array file.

    Each mutation reloads the whole file, edits the list in memory and writes
    the full list back through a temporary file that replaces the previous file.
    """

    def __init__(self, path: Path, logger: logging.Logger) -> None:
        self.path = path
        self.logger = logger

    def list_all(self) -> list[ProviderRecord]:
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            self.logger.debug("Providers file %s absent; treating as empty", self.path)
            return []
        except OSError as exc:
            raise StorageIOError(
                f"Failed to open providers file while reading config ({exc})"
            ) from exc

        if not data.strip():
            return []

        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise StorageFormatError(
                f"Broken providers config data/syntax in {self.path} (not UTF-8: {exc.reason})"
            ) from exc

        try:
            return _RECORDS_ADAPTER.validate_json(text)
        except ValidationError as exc:
            raise StorageFormatError(
                f"Broken providers config data/syntax in {self.path} "
                f"({exc.error_count()} error(s): {exc.errors()[0]['msg']})"
            ) from exc

    def get(self, name: str) -> ProviderRecord:
        for record in self.list_all():
            if record.name == name:
                return record
        raise NotFoundError(f"Provider '{name}' not found")

    def add(self, record: ProviderRecord) -> None:
        records = self.list_all()
        records.append(record)
        self._save(records)
        self.logger.info("Stored provider '%s' (%s)", record.name, record.kind)

    def remove(self, name: str) -> None:
        records = self.list_all()
        remaining = [record for record in records if record.name != name]
        if len(remaining) == len(records):
            raise NotFoundError(f"Provider '{name}' not found")
        self._save(remaining)
        self.logger.info("Removed provider '%s'", name)

    def _save(self, records: list[ProviderRecord]) -> None:
        self.logger.debug(
            "Saving %d provider record(s) to %s: %s",
            len(records),
            self.path,
            sanitize_for_logging([record.model_dump(by_alias=True) for record in records]),
        )
        payload = _RECORDS_ADAPTER.dump_json(records, by_alias=True)
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f"{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "wb") as fh:
                fh.write(payload)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageIOError(
                f"Failed to save providers config to {self.path} ({exc})"
            ) from exc
