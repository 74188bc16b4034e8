"""Render transactions back to journal text."""

from src.domain.constants import DATE_FORMAT, POSTING_INDENT
from src.domain.models.journal import Transaction
from src.domain.models.ledger import Ledger


def render_transaction(transaction: Transaction) -> str:
    """Render a transaction as a journal block.

    Every posting is written with its concrete amount, so inferred amounts
    become explicit.

    Args:
        transaction: Balanced transaction.

    Returns:
        str: Header line followed by indented posting lines.
    """
    header = f"{transaction.date.strftime(DATE_FORMAT)} {transaction.description}"
    lines = [header.rstrip()]
    for posting in transaction.postings:
        lines.append(f"{POSTING_INDENT}{posting.account}    {posting.amount}")
    return "\n".join(lines)


def render_journal(ledger: Ledger) -> str:
    """Render a whole ledger, one blank line between transactions."""
    blocks = [render_transaction(t) for t in ledger.transactions()]
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"


__all__ = ["render_transaction", "render_journal"]
