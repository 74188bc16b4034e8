"""Domain package for journal parsing, the ledger model and reports."""

from .constants import CURRENCY_SYMBOL, MINOR_UNIT_SCALE
from .errors import (
    AmbiguousBalanceError,
    AmountFormatError,
    DateFormatError,
    JournalError,
    StructureError,
    UnbalancedTransactionError,
)
from .models import (
    AccountPath,
    Amount,
    BalanceChanges,
    Ledger,
    MonthYear,
    Posting,
    RegisterEntry,
    Transaction,
)
from .policies import account_subtree, exact_account
from .services import (
    balance_changes,
    parse_journal,
    register,
    render_journal,
    transaction_count,
)

__all__ = [
    "CURRENCY_SYMBOL",
    "MINOR_UNIT_SCALE",
    "AmbiguousBalanceError",
    "AmountFormatError",
    "DateFormatError",
    "JournalError",
    "StructureError",
    "UnbalancedTransactionError",
    "AccountPath",
    "Amount",
    "BalanceChanges",
    "Ledger",
    "MonthYear",
    "Posting",
    "RegisterEntry",
    "Transaction",
    "account_subtree",
    "exact_account",
    "balance_changes",
    "parse_journal",
    "register",
    "render_journal",
    "transaction_count",
]
