"""
Ledger Metrics

Pure functions over a list of transactions. Nothing here is cached;
the dashboard calls these on every render.

GST arithmetic:
- Output tax: GST collected on sales
- Input tax: GST paid on expenses, claimable as credit
- Tax payable: output less input, floored at zero. Excess credit is
  neither carried forward nor refunded.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable

from tax_copilot.config import LedgerConfig
from tax_copilot.models.summary import LedgerSummary, MonthlyBucket
from tax_copilot.models.transaction import Transaction, TransactionType


ZERO = Decimal("0")

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _sum(values: Iterable[Decimal]) -> Decimal:
    return sum(values, start=ZERO)


def total_amount(transactions: Iterable[Transaction], kind: TransactionType) -> Decimal:
    """Sum of amounts for one kind of transaction."""
    return _sum(t.amount for t in transactions if t.kind == kind)


def total_tax(transactions: Iterable[Transaction], kind: TransactionType) -> Decimal:
    """Sum of stored GST amounts for one kind of transaction."""
    return _sum(t.tax_amount for t in transactions if t.kind == kind)


def summarize(
    transactions: list[Transaction],
    config: LedgerConfig,
) -> LedgerSummary:
    """Compute every aggregate figure the dashboard shows."""
    total_sales = total_amount(transactions, TransactionType.SALE)
    total_expenses = total_amount(transactions, TransactionType.EXPENSE)
    output_tax = total_tax(transactions, TransactionType.SALE)
    input_tax = total_tax(transactions, TransactionType.EXPENSE)

    return LedgerSummary(
        total_sales=total_sales,
        total_expenses=total_expenses,
        net_income=total_sales - total_expenses,
        output_tax=output_tax,
        input_tax=input_tax,
        tax_payable=max(ZERO, output_tax - input_tax),
        requires_registration=total_sales > config.registration_threshold,
        registration_threshold=config.registration_threshold,
        transaction_count=len(transactions),
    )


def month_label(month: int) -> str:
    """Short English month name, independent of the process locale."""
    return MONTH_ABBREVIATIONS[month - 1]


def monthly_rollup(
    transactions: Iterable[Transaction],
    max_months: int = 6,
) -> list[MonthlyBucket]:
    """
    Income and expense per calendar month.

    Buckets come out in the order their month is first seen while walking
    the ledger in insertion order. Only the last `max_months` buckets in
    that order are kept.
    """
    totals: dict[str, dict] = {}

    for t in transactions:
        bucket = totals.setdefault(
            t.month_key,
            {"label": month_label(t.date.month), "income": ZERO, "expense": ZERO},
        )
        if t.is_sale:
            bucket["income"] += t.amount
        else:
            bucket["expense"] += t.amount

    buckets = [MonthlyBucket(key=key, **values) for key, values in totals.items()]
    return buckets[-max_months:]


def compliance_score(today: date) -> int:
    """
    Cosmetic compliance score shown on the dashboard.

    Depends only on the day of the month: returns get filed on the 10th
    and 20th, so the score steps down as those dates pass. It is not a
    real compliance calculation and ignores the ledger entirely.
    """
    if today.day <= 10:
        return 95
    if today.day <= 20:
        return 90
    return 85
