"""
Derived Ledger Models

Value objects produced from the ledger on demand. None of these are
stored; they are rebuilt from the transaction list every time they
are asked for.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class LedgerSummary(BaseModel):
    """Aggregate sales, expense and GST figures for the whole ledger."""
    model_config = ConfigDict(frozen=True)

    total_sales: Decimal = Field(default=Decimal("0"))
    total_expenses: Decimal = Field(default=Decimal("0"))
    net_income: Decimal = Field(
        default=Decimal("0"),
        description="Sales minus expenses; may be negative"
    )
    output_tax: Decimal = Field(
        default=Decimal("0"),
        description="GST collected on sales"
    )
    input_tax: Decimal = Field(
        default=Decimal("0"),
        description="GST paid on expenses (input tax credit)"
    )
    tax_payable: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Output tax less input tax, floored at zero"
    )
    requires_registration: bool = Field(
        default=False,
        description="Whether total sales exceed the registration threshold"
    )
    registration_threshold: Decimal
    transaction_count: int = Field(default=0, ge=0)


class MonthlyBucket(BaseModel):
    """Income and expense totals for one calendar month."""
    model_config = ConfigDict(frozen=True)

    key: str = Field(
        ...,
        pattern=r"^\d{4}-\d{2}$",
        description="Calendar month as YYYY-MM"
    )
    label: str = Field(
        ...,
        description="Short month name for chart axes, e.g. 'Mar'"
    )
    income: Decimal = Field(default=Decimal("0"))
    expense: Decimal = Field(default=Decimal("0"))
