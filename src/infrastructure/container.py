"""Composition root for wiring infrastructure adapters."""

from pathlib import Path

from src.application.ports.journal_source import JournalSourcePort
from src.application.use_cases.get_balance_changes import (
    GetBalanceChangesUseCase,
)
from src.application.use_cases.get_register import GetRegisterUseCase
from src.application.use_cases.load_ledger import LoadLedgerUseCase
from src.infrastructure.journal_source import FileJournalSource
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


def build_journal_source(
    journal_file: Path | str | None = None,
    settings: LedgerSettings | None = None,
) -> JournalSourcePort:
    """Return the configured journal source.

    Args:
        journal_file: Explicit journal path, taking precedence over settings.
        settings: Optional settings, read from the environment when omitted.

    Returns:
        JournalSourcePort: File-backed journal source.

    Raises:
        RuntimeError: If no journal file is configured.
    """
    resolved = settings or LedgerSettings.from_env()
    path = journal_file if journal_file is not None else resolved.journal_file
    if path is None:
        raise RuntimeError(
            "No journal configured. Pass a journal path or set LEDGER_FILE."
        )
    return FileJournalSource(
        path,
        encoding=resolved.encoding,
        logger=get_app_logger(),
    )


def build_load_ledger_use_case(
    journal_source: JournalSourcePort | None = None,
) -> LoadLedgerUseCase:
    """Return the ledger loading use case."""
    return LoadLedgerUseCase(
        journal_source=journal_source or build_journal_source(),
        logger=get_app_logger(),
    )


def build_register_use_case(
    journal_source: JournalSourcePort | None = None,
) -> GetRegisterUseCase:
    """Return the register use case."""
    return GetRegisterUseCase(
        journal_source=journal_source or build_journal_source(),
        logger=get_app_logger(),
    )


def build_balance_changes_use_case(
    journal_source: JournalSourcePort | None = None,
) -> GetBalanceChangesUseCase:
    """Return the monthly balance changes use case."""
    return GetBalanceChangesUseCase(
        journal_source=journal_source or build_journal_source(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_journal_source",
    "build_load_ledger_use_case",
    "build_register_use_case",
    "build_balance_changes_use_case",
]
