"""
CSV Export

Dumps the ledger to a CSV file the user can download and open in a
spreadsheet or hand to their accountant.

Columns, in order: date, type, amount, category, GSTIN, GST amount.
Fields containing a comma, quote or newline are quoted by the csv
module, so a free-text GSTIN can never shift the columns of its row.
"""

import csv
import io
from datetime import date
from decimal import Decimal
from typing import Iterable

from tax_copilot.models.transaction import Transaction


EXPORT_HEADERS = ["Date", "Type", "Amount", "Category", "GSTIN", "GST Amount"]


def format_amount(value: Decimal) -> str:
    """Plain decimal notation without trailing zeros (27000.00 -> 27000)."""
    return f"{value.normalize():f}"


def transaction_to_row(transaction: Transaction) -> list[str]:
    return [
        transaction.date.isoformat(),
        transaction.kind.value,
        format_amount(transaction.amount),
        transaction.category.value,
        transaction.taxpayer_id or "",
        format_amount(transaction.tax_amount),
    ]


def transactions_to_csv(transactions: Iterable[Transaction]) -> str:
    """Render transactions, in the order given, as CSV text with a header row."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(EXPORT_HEADERS)
    for transaction in transactions:
        writer.writerow(transaction_to_row(transaction))
    return buffer.getvalue()


def build_export_filename(today: date, prefix: str = "ps15_transactions") -> str:
    """Download name with the export date embedded, e.g. ps15_transactions_2024-03-15.csv."""
    return f"{prefix}_{today.isoformat()}.csv"
