"""Application use cases package."""

from .get_balance_changes import (
    BalanceChangeRow,
    BalanceChangesView,
    GetBalanceChangesUseCase,
)
from .get_register import GetRegisterUseCase, RegisterReport
from .load_ledger import LoadLedgerUseCase

__all__ = [
    "BalanceChangeRow",
    "BalanceChangesView",
    "GetBalanceChangesUseCase",
    "GetRegisterUseCase",
    "RegisterReport",
    "LoadLedgerUseCase",
]
