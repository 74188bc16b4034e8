"""Domain models package."""

from .accounts import AccountPath
from .amount import Amount, sum_amounts
from .journal import (
    CandidatePosting,
    CandidateTransaction,
    Posting,
    Transaction,
)
from .ledger import Ledger
from .reports import (
    BalanceChanges,
    JournalSummary,
    MonthYear,
    RegisterEntry,
)

__all__ = [
    "AccountPath",
    "Amount",
    "sum_amounts",
    "CandidatePosting",
    "CandidateTransaction",
    "Posting",
    "Transaction",
    "Ledger",
    "BalanceChanges",
    "JournalSummary",
    "MonthYear",
    "RegisterEntry",
]
