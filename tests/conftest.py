"""Shared fixtures: in-memory storage, a pinned clock, and a transaction factory."""

from datetime import date
from decimal import Decimal
from typing import Optional

import pytest

from tax_copilot.config import LedgerConfig
from tax_copilot.ledger import LedgerEngine
from tax_copilot.models.transaction import SupplyCategory, Transaction, TransactionType
from tax_copilot.services.storage import (
    DEFAULT_TRANSACTIONS_KEY,
    InMemoryStorage,
    TransactionSnapshotStore,
)

from tests.helpers import FIXED_TODAY


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def snapshot_store(storage) -> TransactionSnapshotStore:
    return TransactionSnapshotStore(storage)


@pytest.fixture
def engine(snapshot_store) -> LedgerEngine:
    """Engine seeded with demo data relative to FIXED_TODAY."""
    return LedgerEngine(snapshot_store, clock=lambda: FIXED_TODAY)


@pytest.fixture
def empty_engine(storage) -> LedgerEngine:
    """Engine restored from an empty stored ledger."""
    storage.set_item(DEFAULT_TRANSACTIONS_KEY, "[]")
    return LedgerEngine(TransactionSnapshotStore(storage), clock=lambda: FIXED_TODAY)


@pytest.fixture
def make_transaction():
    """Factory for transactions with GST worked out from the default rates."""
    config = LedgerConfig()
    counter = {"next": 1}

    def _make(
        kind: TransactionType = TransactionType.SALE,
        amount: str = "1000",
        category: SupplyCategory = SupplyCategory.GOODS,
        on: date = FIXED_TODAY,
        taxpayer_id: Optional[str] = None,
    ) -> Transaction:
        net = Decimal(amount)
        transaction = Transaction(
            id=f"t{counter['next']}",
            date=on,
            kind=kind,
            amount=net,
            category=category,
            taxpayer_id=taxpayer_id,
            tax_amount=net * config.rate_for(category),
        )
        counter["next"] += 1
        return transaction

    return _make
