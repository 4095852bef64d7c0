"""
Ledger Engine

DESIGN DECISION: The engine is the only thing allowed to change the
transaction list. Everything else (dashboard, reminders, export) reads
from it.

Lifecycle:
1. Startup → restore the stored snapshot, or fall back to the demo seed
2. add / delete / reset → mutate in memory, then persist the snapshot
3. Reads → metrics recomputed from the list on every call

A failed write is logged and remembered in `last_save_ok`; it never
fails the operation and never rolls back the in-memory change.
"""

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional, Union
from uuid import uuid4

from tax_copilot.activity import ActivityLogger
from tax_copilot.config import LedgerConfig
from tax_copilot.export import build_export_filename, transactions_to_csv
from tax_copilot.ledger.metrics import compliance_score, monthly_rollup, summarize
from tax_copilot.ledger.seed import generate_seed_transactions
from tax_copilot.models.summary import LedgerSummary, MonthlyBucket
from tax_copilot.models.transaction import SupplyCategory, Transaction, TransactionType
from tax_copilot.services.storage import TransactionSnapshotStore


AmountLike = Union[Decimal, int, float, str]


class LedgerError(Exception):
    """Base exception for ledger operations."""
    pass


class InvalidAmountError(LedgerError, ValueError):
    """Transaction amount is not a positive finite number."""
    pass


def parse_amount(value: AmountLike) -> Decimal:
    """
    Convert user input to a positive, finite Decimal.

    Floats go through str() so 0.1 stays 0.1 rather than its binary
    expansion.

    Raises:
        InvalidAmountError: If the value is not a number, is not finite,
            or is zero or negative
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Amount must be a number, got {value!r}")

    try:
        if isinstance(value, Decimal):
            amount = value
        elif isinstance(value, int):
            amount = Decimal(value)
        elif isinstance(value, float):
            amount = Decimal(str(value))
        elif isinstance(value, str):
            amount = Decimal(value.strip().replace(",", ""))
        else:
            raise InvalidAmountError(f"Amount must be a number, got {value!r}")
    except InvalidOperation as exc:
        raise InvalidAmountError(f"Amount must be a number, got {value!r}") from exc

    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {value!r}")
    if amount <= 0:
        raise InvalidAmountError(f"Amount must be greater than zero, got {value!r}")
    return amount


class LedgerEngine:
    """
    Owns the transaction list and everything derived from it.

    All operations are synchronous and run to completion before returning.
    """

    def __init__(
        self,
        snapshot_store: TransactionSnapshotStore,
        config: Optional[LedgerConfig] = None,
        clock: Callable[[], date] = date.today,
        activity_logger: Optional[ActivityLogger] = None,
    ):
        """
        Initialize the engine and load the ledger.

        Args:
            snapshot_store: Persistence port for the transaction list
            config: Rate table, threshold and rollup size
            clock: Returns "today"; injected so tests can pin the date
            activity_logger: Structured logger for ledger events
        """
        self._store = snapshot_store
        self._config = config or LedgerConfig()
        self._clock = clock
        self._activity = activity_logger or ActivityLogger()
        self._transactions: list[Transaction] = []
        self._last_save_ok = True

        self._initialize()

    def _initialize(self) -> None:
        stored = self._store.load()
        if stored is not None:
            self._transactions = stored
            self._activity.log_ledger_loaded(len(stored))
            return

        self._transactions = generate_seed_transactions(self.today(), self._config)
        self._activity.log_ledger_seeded(len(self._transactions), reason="no_snapshot")

    # Read accessors ---------------------------------------------------------

    @property
    def config(self) -> LedgerConfig:
        return self._config

    @property
    def transactions(self) -> list[Transaction]:
        """All transactions in insertion order (a copy)."""
        return list(self._transactions)

    @property
    def transactions_by_date(self) -> list[Transaction]:
        """All transactions newest first, for display."""
        return sorted(self._transactions, key=lambda t: t.date, reverse=True)

    @property
    def last_save_ok(self) -> bool:
        """Whether the most recent persistence write succeeded."""
        return self._last_save_ok

    def __len__(self) -> int:
        return len(self._transactions)

    def today(self) -> date:
        return self._clock()

    def get(self, transaction_id: str) -> Optional[Transaction]:
        """Find a transaction by ID."""
        for transaction in self._transactions:
            if transaction.id == transaction_id:
                return transaction
        return None

    def summary(self) -> LedgerSummary:
        return summarize(self._transactions, self._config)

    def monthly_rollup(self) -> list[MonthlyBucket]:
        return monthly_rollup(self._transactions, self._config.rollup_months)

    def compliance_score(self) -> int:
        return compliance_score(self.today())

    # Mutations --------------------------------------------------------------

    def add(
        self,
        date: date,
        kind: Union[TransactionType, str],
        amount: AmountLike,
        category: Union[SupplyCategory, str],
        taxpayer_id: Optional[str] = None,
    ) -> Transaction:
        """
        Record a new transaction.

        GST is computed here from the current rate table and stored
        with the transaction.

        Returns:
            The created transaction, including its tax amount

        Raises:
            InvalidAmountError: If amount is not a positive finite number
            pydantic.ValidationError: If another field is malformed
        """
        try:
            net_amount = parse_amount(amount)
        except InvalidAmountError as e:
            self._activity.log_transaction_rejected(str(e), repr(amount))
            raise

        category = SupplyCategory(category)
        transaction = Transaction(
            id=self._new_id(),
            date=date,
            kind=TransactionType(kind),
            amount=net_amount,
            category=category,
            taxpayer_id=taxpayer_id,
            tax_amount=net_amount * self._config.rate_for(category),
        )

        self._transactions.append(transaction)
        self._activity.log_transaction_added(
            transaction_id=transaction.id,
            kind=transaction.kind.value,
            amount=str(transaction.amount),
            tax_amount=str(transaction.tax_amount),
        )
        self._persist()
        return transaction

    def delete(self, transaction_id: str) -> bool:
        """
        Remove a transaction.

        Returns:
            True if it was removed, False if no such ID exists
        """
        remaining = [t for t in self._transactions if t.id != transaction_id]
        if len(remaining) == len(self._transactions):
            return False

        self._transactions = remaining
        self._activity.log_transaction_deleted(transaction_id)
        self._persist()
        return True

    def reset(self) -> list[Transaction]:
        """
        Replace the whole ledger with fresh demo data.

        Irreversibly discards every existing transaction.
        """
        today = self.today()
        self._transactions = generate_seed_transactions(today, self._config)
        self._activity.log_ledger_reset(len(self._transactions), as_of=today)
        self._persist()
        return self.transactions

    # Export -----------------------------------------------------------------

    def build_export(self, prefix: str = "ps15_transactions") -> tuple[str, str]:
        """
        Render the ledger as CSV without recording an export.

        Returns:
            (filename, csv_text)
        """
        filename = build_export_filename(self.today(), prefix)
        return filename, transactions_to_csv(self._transactions)

    def record_export(self, filename: str) -> None:
        """Log that the user downloaded `filename`."""
        self._activity.log_exported(filename, len(self._transactions))

    def export_csv(self, prefix: str = "ps15_transactions") -> tuple[str, str]:
        """
        Dump the ledger as CSV and log the export.

        Returns:
            (filename, csv_text)
        """
        filename, content = self.build_export(prefix)
        self.record_export(filename)
        return filename, content

    # Internal helpers -------------------------------------------------------

    def _new_id(self) -> str:
        while True:
            candidate = uuid4().hex
            if self.get(candidate) is None:
                return candidate

    def _persist(self) -> None:
        self._last_save_ok = self._store.save(self._transactions)
