"""Ledger export package."""

from tax_copilot.export.csv_export import (
    EXPORT_HEADERS,
    build_export_filename,
    format_amount,
    transactions_to_csv,
)

__all__ = [
    "EXPORT_HEADERS",
    "build_export_filename",
    "format_amount",
    "transactions_to_csv",
]
