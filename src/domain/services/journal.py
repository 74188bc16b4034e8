"""Journal parsing pipeline: lexer, parser, balancer, ledger."""

from logging import Logger

from src.domain.errors import JournalError
from src.domain.models.ledger import Ledger
from src.domain.services.balancer import balance_transaction
from src.domain.services.lexer import classify_lines, iter_blocks
from src.domain.services.parser import parse_block


def parse_journal(text: str, logger: Logger | None = None) -> Ledger:
    """Parse journal text into a ledger of balanced transactions.

    The first malformed line or unbalanced transaction aborts the whole
    parse; no transaction is skipped.

    Args:
        text: Full journal text, already decoded.
        logger: Optional logger passed to the balancer for warnings.

    Returns:
        Ledger: Transactions in input order.

    Raises:
        JournalError: Any parsing or balancing error, annotated with the
            line number and, when known, the transaction index.
    """
    ledger = Ledger()
    for index, block in enumerate(iter_blocks(classify_lines(text))):
        try:
            candidate = parse_block(block)
            ledger.add(balance_transaction(candidate, logger=logger))
        except JournalError as exc:
            if exc.transaction_index is None:
                exc.transaction_index = index
            raise
    return ledger


__all__ = ["parse_journal"]
