"""
Typed Snapshot Stores

The ledger engine never sees raw storage. It talks to these stores,
which turn key-value strings into models and back.

IMPORTANT: Both stores degrade instead of raising. A missing, corrupt
or unreadable snapshot reads as "absent"; a failed write returns False.
The in-memory ledger stays the source of truth either way.
"""

from typing import Optional

from pydantic import TypeAdapter, ValidationError

from tax_copilot.activity import ActivityLogger
from tax_copilot.models.transaction import Language, Transaction
from tax_copilot.services.storage.interface import (
    KeyValueStorageInterface,
    StorageError,
)


DEFAULT_TRANSACTIONS_KEY = "ps15_transactions"
DEFAULT_LANGUAGE_KEY = "ps15_language"

_TRANSACTION_LIST = TypeAdapter(list[Transaction])


class TransactionSnapshotStore:
    """
    Persistence port for the ledger.

    Stores the whole transaction list as one JSON array under a single key.
    """

    def __init__(
        self,
        storage: KeyValueStorageInterface,
        key: str = DEFAULT_TRANSACTIONS_KEY,
        activity_logger: Optional[ActivityLogger] = None,
    ):
        self._storage = storage
        self._key = key
        self._activity = activity_logger or ActivityLogger()

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> Optional[list[Transaction]]:
        """
        Read the stored transaction list.

        Returns:
            The transactions in stored order, or None if nothing usable
            is stored.
        """
        try:
            raw = self._storage.get_item(self._key)
        except StorageError as e:
            self._activity.log_persistence_failed("load", str(e), key=self._key)
            return None

        if raw is None:
            return None

        try:
            return _TRANSACTION_LIST.validate_json(raw)
        except ValidationError as e:
            self._activity.log_persistence_failed(
                "load",
                f"Malformed snapshot: {e.error_count()} validation error(s)",
                key=self._key,
            )
            return None

    def save(self, transactions: list[Transaction]) -> bool:
        """
        Write the transaction list.

        Returns:
            True if the write succeeded
        """
        payload = _TRANSACTION_LIST.dump_json(list(transactions)).decode("utf-8")
        try:
            self._storage.set_item(self._key, payload)
        except StorageError as e:
            self._activity.log_persistence_failed("save", str(e), key=self._key)
            return False
        return True


class LanguagePreferenceStore:
    """Persists the two-valued UI language preference."""

    def __init__(
        self,
        storage: KeyValueStorageInterface,
        key: str = DEFAULT_LANGUAGE_KEY,
        default: Language = Language.ENGLISH,
        activity_logger: Optional[ActivityLogger] = None,
    ):
        self._storage = storage
        self._key = key
        self._default = default
        self._activity = activity_logger or ActivityLogger()

    def load(self) -> Language:
        """Stored language, or the default if none (or an unknown one) is stored."""
        try:
            raw = self._storage.get_item(self._key)
        except StorageError as e:
            self._activity.log_persistence_failed("load", str(e), key=self._key)
            return self._default

        try:
            return Language(raw) if raw is not None else self._default
        except ValueError:
            return self._default

    def save(self, language: Language) -> bool:
        try:
            self._storage.set_item(self._key, Language(language).value)
        except StorageError as e:
            self._activity.log_persistence_failed("save", str(e), key=self._key)
            return False
        return True
