"""
Abstract Storage Interface

DESIGN DECISION: Persistence is a plain key-value area, the same shape
as browser local storage. This allows us to:
1. Keep the ledger on the local disk today
2. Use in-memory storage for testing and throwaway sessions
3. Swap in a real database later without touching the ledger

Values are opaque strings. Typed reads and writes on top of this
(transaction snapshots, language preference) live in snapshot.py.
"""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStorageInterface(ABC):
    """
    Abstract interface for key-value storage operations.

    Any storage implementation (local file, in-memory, etc.)
    must implement these methods.
    """

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """
        Read the value stored under a key.

        Args:
            key: Storage key

        Returns:
            The stored string, or None if the key is absent

        Raises:
            StorageUnavailableError: If the backend cannot be read
            CorruptSnapshotError: If the backend content is unreadable
        """
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """
        Store a value under a key, replacing any previous value.

        Raises:
            StorageUnavailableError: If the write fails
        """
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """
        Remove a key. Removing an absent key is not an error.

        Raises:
            StorageUnavailableError: If the write fails
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class StorageUnavailableError(StorageError):
    """Storage backend could not be read or written."""
    pass


class CorruptSnapshotError(StorageError):
    """Stored content exists but cannot be deserialized."""
    pass
