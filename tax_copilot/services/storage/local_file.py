"""
Local File Storage Implementation

DESIGN DECISION: All keys live in one small JSON object on disk,
mirroring browser local storage:
1. No database setup required
2. Users can open the file and read their data
3. One file per data directory keeps backups trivial

Writes go to a temp file first and are moved into place, so a crash
mid-write leaves the previous snapshot intact. Transient OS errors on
write are retried a few times before giving up.
"""

import json
from pathlib import Path
from typing import Optional

from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from tax_copilot.config import StorageSettings
from tax_copilot.services.storage.interface import (
    CorruptSnapshotError,
    KeyValueStorageInterface,
    StorageUnavailableError,
)


class LocalFileStorage(KeyValueStorageInterface):
    """
    JSON-file implementation of key-value storage.

    The file holds a single JSON object mapping keys to string values.
    """

    def __init__(self, path: Path, write_attempts: int = 3):
        self._path = Path(path)
        self._write_attempts = write_attempts

    @classmethod
    def from_settings(cls, settings: StorageSettings) -> "LocalFileStorage":
        """Build a storage backed by the configured file."""
        return cls(settings.storage_path, write_attempts=settings.write_attempts)

    @property
    def path(self) -> Path:
        return self._path

    def get_item(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        if value is not None and not isinstance(value, str):
            raise CorruptSnapshotError(
                f"Expected a string value for '{key}' in {self._path}"
            )
        return value

    def set_item(self, key: str, value: str) -> None:
        items = self._read_for_update()
        items[key] = value
        self._write_all(items)

    def remove_item(self, key: str) -> None:
        items = self._read_for_update()
        if key in items:
            del items[key]
            self._write_all(items)

    def _read_all(self) -> dict:
        """Load the whole key-value object from disk."""
        if not self._path.exists():
            return {}
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise CorruptSnapshotError(f"Corrupted JSON data in {self._path}") from exc
        except OSError as exc:
            raise StorageUnavailableError(f"Unable to read from {self._path}") from exc

        if not isinstance(payload, dict):
            raise CorruptSnapshotError(f"Expected an object payload in {self._path}")
        return payload

    def _read_for_update(self) -> dict:
        # An unreadable file must not block every future write
        try:
            return self._read_all()
        except CorruptSnapshotError:
            return {}

    def _write_all(self, items: dict) -> None:
        try:
            for attempt in Retrying(
                stop=stop_after_attempt(self._write_attempts),
                wait=wait_exponential(multiplier=0.1, min=0.1, max=1),
                retry=retry_if_exception_type(OSError),
                reraise=True,
            ):
                with attempt:
                    self._replace_file(items)
        except OSError as exc:
            raise StorageUnavailableError(f"Unable to write to {self._path}") from exc

    def _replace_file(self, items: dict) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        with temp_path.open("w", encoding="utf-8") as handle:
            json.dump(items, handle, indent=2, ensure_ascii=False)
            handle.flush()
        temp_path.replace(self._path)
