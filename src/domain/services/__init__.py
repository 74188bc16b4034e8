"""Domain services package."""

from .balance import balance_changes, summarize, transactions_by_month
from .balancer import balance_transaction
from .journal import parse_journal
from .lexer import classify_lines, iter_blocks
from .parser import parse_amount, parse_block, parse_date
from .register import register, transaction_count
from .rendering import render_journal, render_transaction

__all__ = [
    "balance_changes",
    "summarize",
    "transactions_by_month",
    "balance_transaction",
    "parse_journal",
    "classify_lines",
    "iter_blocks",
    "parse_amount",
    "parse_block",
    "parse_date",
    "register",
    "transaction_count",
    "render_journal",
    "render_transaction",
]
