"""Domain models for report output."""

from dataclasses import dataclass, field
from datetime import date

from src.domain.models.amount import Amount


@dataclass(frozen=True)
class RegisterEntry:
    """One posting of a register report with the balance after it.

    Attributes:
        date: Date of the owning transaction.
        description: Description of the owning transaction.
        account: Full account name of the posting.
        amount: Posting amount.
        balance_after: Running balance including this posting.
        transaction_index: Position of the owning transaction in the ledger.
    """

    date: date
    description: str
    account: str
    amount: Amount
    balance_after: Amount
    transaction_index: int


@dataclass(frozen=True, order=True)
class MonthYear:
    """A calendar month, ordered chronologically."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"Invalid month: {self.month}")

    @classmethod
    def from_date(cls, value: date) -> "MonthYear":
        return cls(value.year, value.month)

    def next_month(self) -> "MonthYear":
        if self.month == 12:
            return MonthYear(self.year + 1, 1)
        return MonthYear(self.year, self.month + 1)

    def __str__(self) -> str:
        return f"{self.year}-{self.month:02d}"


@dataclass(frozen=True)
class JournalSummary:
    """First and final month covered by a ledger."""

    first_month: MonthYear
    final_month: MonthYear
    transaction_count: int

    def months(self) -> list[MonthYear]:
        """Return every month from first to final, inclusive."""
        months = []
        current = self.first_month
        while current <= self.final_month:
            months.append(current)
            current = current.next_month()
        return months


@dataclass(frozen=True)
class BalanceChanges:
    """Net amount posted per account and month.

    Attributes:
        months: Consecutive months covered by the ledger.
        cells: Net change keyed by ``(account name, month)``. Months without
            postings to an account have no cell.
    """

    months: tuple[MonthYear, ...] = ()
    cells: dict[tuple[str, MonthYear], Amount] = field(default_factory=dict)

    def get(self, account: str, month: MonthYear) -> Amount | None:
        """Return the change for an account in a month, or None."""
        return self.cells.get((account, month))

    def accounts(self) -> list[str]:
        return sorted({account for account, _ in self.cells})

    def row(self, account: str) -> list[Amount | None]:
        """Return one value per month for the account."""
        return [self.get(account, month) for month in self.months]


__all__ = [
    "RegisterEntry",
    "MonthYear",
    "JournalSummary",
    "BalanceChanges",
]
