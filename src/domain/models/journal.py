"""Domain models for journal transactions and postings."""

from dataclasses import dataclass, field
from datetime import date

from src.domain.models.accounts import AccountPath
from src.domain.models.amount import Amount, sum_amounts


@dataclass(frozen=True)
class Posting:
    """One account/amount line of a balanced transaction."""

    account: AccountPath
    amount: Amount


@dataclass(frozen=True)
class Transaction:
    """A balanced transaction.

    Attributes:
        date: Transaction date from the header line.
        description: Free text following the date, possibly empty.
        postings: Two or more postings, in input order.
        line_number: 1-based line of the header in the source text.
    """

    date: date
    description: str
    postings: tuple[Posting, ...]
    line_number: int | None = field(default=None, compare=False)

    def total(self) -> Amount:
        """Return the sum of every posting amount."""
        return sum_amounts(posting.amount for posting in self.postings)

    @property
    def is_balanced(self) -> bool:
        return self.total().is_zero()


@dataclass(frozen=True)
class CandidatePosting:
    """Parsed posting whose amount may still be unspecified."""

    account: AccountPath
    amount: Amount | None
    line_number: int | None = field(default=None, compare=False)


@dataclass(frozen=True)
class CandidateTransaction:
    """Parsed transaction block awaiting balancing."""

    date: date
    description: str
    postings: tuple[CandidatePosting, ...]
    line_number: int | None = field(default=None, compare=False)

    @property
    def unspecified_count(self) -> int:
        return sum(1 for posting in self.postings if posting.amount is None)


__all__ = [
    "Posting",
    "Transaction",
    "CandidatePosting",
    "CandidateTransaction",
]
