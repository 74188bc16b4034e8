"""Use case to parse a journal source into a ledger."""

from src.application.ports.journal_source import JournalSourcePort
from src.domain.errors import JournalError
from src.domain.models.ledger import Ledger
from src.domain.services.journal import parse_journal
from src.infrastructure.logging.logger import get_app_logger


class LoadLedgerUseCase:
    """Read a journal and build its ledger."""

    def __init__(
        self,
        journal_source: JournalSourcePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            journal_source: Port providing the journal text.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._journal_source = journal_source
        self._logger = logger or get_app_logger()

    def execute(self) -> Ledger:
        """Return the parsed ledger.

        Returns:
            Ledger: Balanced transactions in journal order.

        Raises:
            JournalError: If the journal is malformed or unbalanced.
        """
        location = self._journal_source.location
        text = self._journal_source.read_text()
        try:
            ledger = parse_journal(text, logger=self._logger)
        except JournalError as exc:
            self._logger.error(f"Failed to parse journal {location}: {exc}")
            raise
        self._logger.info(
            f"Parsed {ledger.transaction_count()} transactions from {location}"
        )
        return ledger


__all__ = ["LoadLedgerUseCase"]
