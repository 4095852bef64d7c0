"""
Core Data Models for Tax Copilot

These models define the schemas for everything stored in the ledger.
They are designed to:
1. Enforce type safety at runtime
2. Provide clear validation error messages
3. Serialize losslessly to the local storage snapshot

DESIGN DECISION: A Transaction is frozen. The GST amount is worked out
once, when the transaction is recorded, and stored alongside it so a
later change to the rate table never rewrites history.
"""

import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class TransactionType(str, Enum):
    """Direction of money for a transaction."""
    SALE = "sale"
    EXPENSE = "expense"


class SupplyCategory(str, Enum):
    """
    Supply category of a transaction.

    The category decides which GST rate applies.
    """
    GOODS = "goods"
    SERVICE = "service"


class Language(str, Enum):
    """UI languages the app ships string tables for."""
    ENGLISH = "en"
    HINDI = "hi"


# =============================================================================
# TAX CONSTANTS
# =============================================================================

GST_RATES: dict[SupplyCategory, Decimal] = {
    SupplyCategory.GOODS: Decimal("0.18"),
    SupplyCategory.SERVICE: Decimal("0.12"),
}

# ₹20 Lakhs
GST_REGISTRATION_THRESHOLD = Decimal("2000000")

# A GSTIN is exactly 15 characters; we only enforce the upper bound
TAXPAYER_ID_MAX_LENGTH = 15


# =============================================================================
# CORE TRANSACTION MODEL
# =============================================================================

class Transaction(BaseModel):
    """
    A single sale or expense recorded in the ledger.

    `amount` is net of tax. `tax_amount` is amount x rate(category)
    at the moment the transaction was recorded.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: str = Field(
        ...,
        min_length=1,
        description="Unique transaction ID, never reused"
    )
    date: datetime.date = Field(
        ...,
        description="Day the transaction occurred"
    )
    kind: TransactionType = Field(
        ...,
        description="Sale or expense"
    )
    amount: Decimal = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Amount in INR, net of tax"
    )
    category: SupplyCategory = Field(
        ...,
        description="Goods or service"
    )
    taxpayer_id: Optional[str] = Field(
        default=None,
        max_length=TAXPAYER_ID_MAX_LENGTH,
        description="Counterparty GSTIN, free text"
    )
    tax_amount: Decimal = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="GST on this transaction in INR"
    )

    @field_validator('taxpayer_id', mode='before')
    @classmethod
    def normalize_taxpayer_id(cls, v: Optional[str]) -> Optional[str]:
        """GSTINs are upper-case; a blank value means none was given."""
        if v is None:
            return None
        v = str(v).strip().upper()
        return v or None

    @property
    def is_sale(self) -> bool:
        return self.kind == TransactionType.SALE

    @property
    def is_expense(self) -> bool:
        return self.kind == TransactionType.EXPENSE

    @property
    def month_key(self) -> str:
        """Calendar month of the transaction as YYYY-MM."""
        return f"{self.date.year:04d}-{self.date.month:02d}"
