"""
Activity Logger

Every ledger mutation and every storage hiccup is written to the
structured local log. This provides:
1. Debugging capability
2. Visibility into silently degraded persistence

The activity logger:
- Only logs locally, nothing is persisted (there is no audit trail)
- Never raises; logging must not break a ledger operation
"""

import logging
from datetime import date
from typing import Optional

import structlog


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_log_level(level: str) -> None:
    """Route structlog output through the stdlib root logger at `level`."""
    logging.basicConfig(format="%(message)s", level=getattr(logging, level.upper()))


def get_logger(name: Optional[str] = None):
    """Get a structlog logger bound to `name`."""
    return structlog.get_logger(name)


class ActivityLogger:
    """
    Central activity logging service for the ledger.

    One method per event so call sites stay short and event
    names stay consistent across the codebase.
    """

    def __init__(self, logger=None):
        self._logger = logger or get_logger("tax_copilot.ledger")

    def log_ledger_loaded(self, transaction_count: int) -> None:
        """Log a ledger restored from storage."""
        self._logger.info("ledger_loaded", transaction_count=transaction_count)

    def log_ledger_seeded(self, transaction_count: int, reason: str) -> None:
        """Log a ledger initialized from the demo seed."""
        self._logger.info(
            "ledger_seeded",
            transaction_count=transaction_count,
            reason=reason,
        )

    def log_transaction_added(
        self,
        transaction_id: str,
        kind: str,
        amount: str,
        tax_amount: str,
    ) -> None:
        """Log a recorded transaction."""
        self._logger.info(
            "transaction_added",
            transaction_id=transaction_id,
            kind=kind,
            amount=amount,
            tax_amount=tax_amount,
        )

    def log_transaction_rejected(self, reason: str, amount: str) -> None:
        """Log a transaction refused by validation."""
        self._logger.warning("transaction_rejected", reason=reason, amount=amount)

    def log_transaction_deleted(self, transaction_id: str) -> None:
        """Log a removed transaction."""
        self._logger.info("transaction_deleted", transaction_id=transaction_id)

    def log_ledger_reset(self, transaction_count: int, as_of: date) -> None:
        """Log a reset back to the demo seed."""
        self._logger.warning(
            "ledger_reset",
            transaction_count=transaction_count,
            as_of=as_of.isoformat(),
        )

    def log_exported(self, filename: str, row_count: int) -> None:
        """Log a CSV export."""
        self._logger.info("ledger_exported", filename=filename, row_count=row_count)

    def log_persistence_failed(
        self,
        operation: str,
        error_message: str,
        key: Optional[str] = None,
    ) -> None:
        """Log a storage read or write that could not be completed."""
        self._logger.warning(
            "persistence_failed",
            operation=operation,
            error=error_message,
            key=key,
        )
