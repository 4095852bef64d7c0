"""
Data Models Package

This package contains all Pydantic models used in Tax Copilot.
Everything stored in or derived from the ledger conforms to these schemas.
"""

from tax_copilot.models.transaction import (
    GST_RATES,
    GST_REGISTRATION_THRESHOLD,
    TAXPAYER_ID_MAX_LENGTH,
    Language,
    SupplyCategory,
    Transaction,
    TransactionType,
)
from tax_copilot.models.summary import (
    LedgerSummary,
    MonthlyBucket,
)

__all__ = [
    # Transaction models
    "GST_RATES",
    "GST_REGISTRATION_THRESHOLD",
    "TAXPAYER_ID_MAX_LENGTH",
    "Language",
    "SupplyCategory",
    "Transaction",
    "TransactionType",
    # Derived models
    "LedgerSummary",
    "MonthlyBucket",
]
