"""
Demo Seed Data

Six transactions spread over the current and two previous months, so a
first-time user lands on a dashboard with something on it. The seed is
always generated relative to the given day, never stored as fixed dates.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from tax_copilot.config import LedgerConfig
from tax_copilot.models.transaction import SupplyCategory, Transaction, TransactionType


# (month offset from today, day of month, kind, amount, category)
SEED_ROWS = (
    (-2, 5, TransactionType.SALE, Decimal("150000"), SupplyCategory.GOODS),
    (-2, 12, TransactionType.EXPENSE, Decimal("45000"), SupplyCategory.GOODS),
    (-1, 8, TransactionType.SALE, Decimal("280000"), SupplyCategory.SERVICE),
    (-1, 20, TransactionType.EXPENSE, Decimal("32000"), SupplyCategory.SERVICE),
    (0, 3, TransactionType.SALE, Decimal("195000"), SupplyCategory.GOODS),
    (0, 10, TransactionType.EXPENSE, Decimal("28000"), SupplyCategory.GOODS),
)


def shift_month(today: date, months: int, day: int) -> date:
    """The given day of the month `months` away from today's month."""
    month_index = today.year * 12 + (today.month - 1) + months
    return date(month_index // 12, month_index % 12 + 1, day)


def generate_seed_transactions(
    today: date,
    config: Optional[LedgerConfig] = None,
) -> list[Transaction]:
    """
    Build the demo ledger relative to `today`.

    IDs are "1" to "6"; transactions added later get random hex IDs,
    so seed IDs cannot collide with them. A reset reissues the same
    six IDs, including any the user deleted.
    """
    config = config or LedgerConfig()
    return [
        Transaction(
            id=str(index),
            date=shift_month(today, offset, day),
            kind=kind,
            amount=amount,
            category=category,
            tax_amount=amount * config.rate_for(category),
        )
        for index, (offset, day, kind, amount, category) in enumerate(SEED_ROWS, start=1)
    ]
