"""
Storage Services Package

Provides the key-value storage interface, its local-file and in-memory
implementations, and the typed snapshot stores the ledger persists through.
"""

from tax_copilot.services.storage.interface import (
    CorruptSnapshotError,
    KeyValueStorageInterface,
    StorageError,
    StorageUnavailableError,
)
from tax_copilot.services.storage.local_file import LocalFileStorage
from tax_copilot.services.storage.memory import InMemoryStorage
from tax_copilot.services.storage.snapshot import (
    DEFAULT_LANGUAGE_KEY,
    DEFAULT_TRANSACTIONS_KEY,
    LanguagePreferenceStore,
    TransactionSnapshotStore,
)

__all__ = [
    # Interfaces
    "KeyValueStorageInterface",
    # Exceptions
    "CorruptSnapshotError",
    "StorageError",
    "StorageUnavailableError",
    # Implementations
    "InMemoryStorage",
    "LocalFileStorage",
    # Snapshot stores
    "DEFAULT_LANGUAGE_KEY",
    "DEFAULT_TRANSACTIONS_KEY",
    "LanguagePreferenceStore",
    "TransactionSnapshotStore",
]
