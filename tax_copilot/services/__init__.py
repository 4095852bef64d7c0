"""Services package."""

from tax_copilot.services.storage import (
    CorruptSnapshotError,
    InMemoryStorage,
    KeyValueStorageInterface,
    LanguagePreferenceStore,
    LocalFileStorage,
    StorageError,
    StorageUnavailableError,
    TransactionSnapshotStore,
)

__all__ = [
    "CorruptSnapshotError",
    "InMemoryStorage",
    "KeyValueStorageInterface",
    "LanguagePreferenceStore",
    "LocalFileStorage",
    "StorageError",
    "StorageUnavailableError",
    "TransactionSnapshotStore",
]
