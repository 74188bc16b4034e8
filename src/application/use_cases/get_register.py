"""Use case to build the register report of one account."""

from dataclasses import dataclass

from src.application.ports.journal_source import JournalSourcePort
from src.application.use_cases.load_ledger import LoadLedgerUseCase
from src.domain.models.amount import Amount
from src.domain.models.ledger import Ledger
from src.domain.models.reports import RegisterEntry
from src.domain.services.register import register, transaction_count
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class RegisterReport:
    """Register entries of one account plus display counts.

    Attributes:
        account: Account the register was built for.
        entries: Matching postings with running balances.
        opening_balance: Balance before the first entry.
        matched_transaction_count: Transactions with at least one entry.
        ledger_transaction_count: Transactions in the whole ledger.
    """

    account: str
    entries: list[RegisterEntry]
    opening_balance: Amount
    matched_transaction_count: int
    ledger_transaction_count: int

    @property
    def closing_balance(self) -> Amount:
        """Return the balance after the last entry."""
        if not self.entries:
            return self.opening_balance
        return self.entries[-1].balance_after


def build_register_report(
    ledger: Ledger,
    account: str,
    opening_balance: Amount | None = None,
) -> RegisterReport:
    """Build a register report from an already parsed ledger.

    Args:
        ledger: Parsed ledger.
        account: Account name, matched exactly.
        opening_balance: Optional starting balance.

    Returns:
        RegisterReport: Entries and counts for the account.
    """
    opening = opening_balance if opening_balance is not None else Amount.zero()
    entries = register(ledger, account, opening)
    return RegisterReport(
        account=account,
        entries=entries,
        opening_balance=opening,
        matched_transaction_count=len(
            {entry.transaction_index for entry in entries}
        ),
        ledger_transaction_count=transaction_count(ledger),
    )


class GetRegisterUseCase:
    """Load a journal and compute the register of an account."""

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

    def execute(
        self,
        account: str,
        opening_balance: Amount | None = None,
    ) -> RegisterReport:
        """Return the register report for an account.

        Args:
            account: Account name, matched exactly.
            opening_balance: Optional starting balance.

        Returns:
            RegisterReport: Entries and counts for the account.
        """
        ledger = LoadLedgerUseCase(
            journal_source=self._journal_source,
            logger=self._logger,
        ).execute()
        report = build_register_report(ledger, account, opening_balance)
        if not report.entries:
            self._logger.warning(f"No postings found for account {account}")
        self._logger.info(
            f"Register for {account}: {len(report.entries)} entries from "
            f"{report.matched_transaction_count} of "
            f"{report.ledger_transaction_count} transactions"
        )
        return report


__all__ = ["RegisterReport", "build_register_report", "GetRegisterUseCase"]
