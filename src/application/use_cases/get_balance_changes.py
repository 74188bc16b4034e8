"""Use case to compute monthly balance changes."""

from dataclasses import dataclass

from src.application.ports.journal_source import JournalSourcePort
from src.application.use_cases.load_ledger import LoadLedgerUseCase
from src.domain.models.accounts import AccountPath
from src.domain.models.amount import Amount, sum_amounts
from src.domain.models.ledger import Ledger
from src.domain.models.reports import MonthYear
from src.domain.policies.account_filters import account_subtree, exact_account
from src.domain.services.balance import balance_changes
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class BalanceChangeRow:
    """Net change of one account in one month."""

    account: str
    month: MonthYear
    amount: Amount


@dataclass(frozen=True)
class BalanceChangesView:
    """Monthly changes for UI rendering, sorted by account then month."""

    months: list[MonthYear]
    rows: list[BalanceChangeRow]

    def accounts(self) -> list[str]:
        return sorted({row.account for row in self.rows})

    def total_for(self, account: str) -> Amount:
        """Return the sum of every monthly change of an account."""
        return sum_amounts(
            row.amount for row in self.rows if row.account == account
        )


def build_balance_changes_view(
    ledger: Ledger,
    account: str | None = None,
    include_subaccounts: bool = False,
) -> BalanceChangesView:
    """Build monthly balance changes from an already parsed ledger.

    Args:
        ledger: Parsed ledger.
        account: Optional account to restrict the rows to. A blank name
            matches no account.
        include_subaccounts: Also keep the sub-accounts of ``account``.

    Returns:
        BalanceChangesView: Months and non-empty cells.
    """
    grid = balance_changes(ledger)
    if account is not None and not account.strip():
        return BalanceChangesView(months=list(grid.months), rows=[])
    matches = None
    if account is not None:
        matches = (
            account_subtree(account)
            if include_subaccounts
            else exact_account(account)
        )

    rows = []
    for name in grid.accounts():
        if matches is not None and not matches(AccountPath.parse(name)):
            continue
        for month in grid.months:
            amount = grid.get(name, month)
            if amount is None:
                continue
            rows.append(
                BalanceChangeRow(account=name, month=month, amount=amount)
            )
    return BalanceChangesView(months=list(grid.months), rows=rows)


class GetBalanceChangesUseCase:
    """Load a journal and compute monthly balance changes."""

    def __init__(
        self,
        journal_source: JournalSourcePort,
        logger=None,
    ) -> None:
        self._journal_source = journal_source
        self._logger = logger or get_app_logger()

    def execute(
        self,
        account: str | None = None,
        include_subaccounts: bool = False,
    ) -> BalanceChangesView:
        """Return monthly balance changes.

        Args:
            account: Optional account to restrict the rows to.
            include_subaccounts: Also keep the sub-accounts of ``account``.

        Returns:
            BalanceChangesView: Months and non-empty cells.
        """
        ledger = LoadLedgerUseCase(
            journal_source=self._journal_source,
            logger=self._logger,
        ).execute()
        view = build_balance_changes_view(
            ledger,
            account=account,
            include_subaccounts=include_subaccounts,
        )
        self._logger.info(
            f"Computed {len(view.rows)} monthly balance changes over "
            f"{len(view.months)} months"
        )
        return view


__all__ = [
    "BalanceChangeRow",
    "BalanceChangesView",
    "build_balance_changes_view",
    "GetBalanceChangesUseCase",
]
