"""Ledger engine package."""

from tax_copilot.ledger.engine import (
    InvalidAmountError,
    LedgerEngine,
    LedgerError,
    parse_amount,
)
from tax_copilot.ledger.metrics import compliance_score, monthly_rollup, summarize
from tax_copilot.ledger.seed import generate_seed_transactions

__all__ = [
    "InvalidAmountError",
    "LedgerEngine",
    "LedgerError",
    "compliance_score",
    "generate_seed_transactions",
    "monthly_rollup",
    "parse_amount",
    "summarize",
]
