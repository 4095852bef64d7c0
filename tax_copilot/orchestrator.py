"""
Application Wiring for Tax Copilot

This module ties the components together:
settings → storage → snapshot stores → ledger engine, plus the
language preference and the chat agent.

DESIGN DECISION: The front-end only ever receives the objects built
here. It never constructs storage or reads settings itself, so the
same wiring serves the Streamlit app and the tests.
"""

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from tax_copilot.activity import ActivityLogger, get_logger
from tax_copilot.agents import TaxChatAgent
from tax_copilot.config import Settings, get_settings
from tax_copilot.i18n import toggle_language
from tax_copilot.ledger import LedgerEngine
from tax_copilot.models.transaction import Language
from tax_copilot.services.storage import (
    InMemoryStorage,
    KeyValueStorageInterface,
    LanguagePreferenceStore,
    LocalFileStorage,
    TransactionSnapshotStore,
)


logger = get_logger(__name__)


@dataclass
class AppComponents:
    """Everything the presentation layer is allowed to talk to."""

    ledger: LedgerEngine
    language_store: LanguagePreferenceStore
    chat_agent: TaxChatAgent
    storage: KeyValueStorageInterface
    export_prefix: str

    def current_language(self) -> Language:
        return self.language_store.load()

    def switch_language(self) -> Language:
        """Flip between English and Hindi and persist the choice."""
        language = toggle_language(self.current_language())
        self.language_store.save(language)
        return language


def create_app_components(
    use_disk: bool = True,
    settings: Optional[Settings] = None,
    storage: Optional[KeyValueStorageInterface] = None,
    clock: Callable[[], date] = date.today,
) -> AppComponents:
    """
    Factory function to create all application components.

    Args:
        use_disk: Whether to persist to the local storage file.
                  Set to False for a throwaway in-memory session.
        settings: Settings to use; defaults to the cached environment settings
        storage: Explicit storage backend; overrides use_disk
        clock: Returns today's date

    Returns:
        AppComponents wired together
    """
    settings = settings or get_settings()
    storage_settings = settings.storage
    app_settings = settings.app

    if storage is None:
        if use_disk:
            storage = LocalFileStorage.from_settings(storage_settings)
        else:
            logger.info("storage_in_memory")
            storage = InMemoryStorage()

    activity_logger = ActivityLogger()

    ledger = LedgerEngine(
        snapshot_store=TransactionSnapshotStore(
            storage,
            key=storage_settings.transactions_key,
            activity_logger=activity_logger,
        ),
        config=settings.ledger,
        clock=clock,
        activity_logger=activity_logger,
    )

    language_store = LanguagePreferenceStore(
        storage,
        key=storage_settings.language_key,
        default=app_settings.default_language,
        activity_logger=activity_logger,
    )

    return AppComponents(
        ledger=ledger,
        language_store=language_store,
        chat_agent=TaxChatAgent(),
        storage=storage,
        export_prefix=app_settings.export_filename_prefix,
    )
