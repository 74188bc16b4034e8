"""Monthly balance changes per account."""

from collections.abc import Iterator

from src.domain.models.amount import Amount
from src.domain.models.journal import Transaction
from src.domain.models.ledger import Ledger
from src.domain.models.reports import BalanceChanges, JournalSummary, MonthYear


def summarize(ledger: Ledger) -> JournalSummary:
    """Return the first and final month covered by a ledger.

    Args:
        ledger: Parsed ledger. Transactions need not be sorted by date.

    Returns:
        JournalSummary: Month range and transaction count.

    Raises:
        ValueError: If the ledger has no transactions.
    """
    transactions = ledger.transactions()
    if not transactions:
        raise ValueError("Cannot summarize an empty ledger")
    months = [MonthYear.from_date(t.date) for t in transactions]
    return JournalSummary(
        first_month=min(months),
        final_month=max(months),
        transaction_count=len(transactions),
    )


def transactions_by_month(
    ledger: Ledger,
) -> Iterator[tuple[MonthYear, list[Transaction]]]:
    """Yield each month of the ledger with the transactions dated in it.

    Months without transactions are yielded with an empty list. Within a
    month, transactions keep ledger order.

    Args:
        ledger: Parsed ledger.

    Yields:
        tuple[MonthYear, list[Transaction]]: Month and its transactions.
    """
    if not ledger.transaction_count():
        return
    buckets: dict[MonthYear, list[Transaction]] = {}
    for transaction in ledger.transactions():
        month = MonthYear.from_date(transaction.date)
        buckets.setdefault(month, []).append(transaction)
    for month in summarize(ledger).months():
        yield month, buckets.get(month, [])


def balance_changes(ledger: Ledger) -> BalanceChanges:
    """Compute the net change posted to each account in each month.

    Args:
        ledger: Parsed ledger.

    Returns:
        BalanceChanges: Grid of monthly changes; empty for an empty ledger.
    """
    months: list[MonthYear] = []
    cells: dict[tuple[str, MonthYear], Amount] = {}
    for month, transactions in transactions_by_month(ledger):
        months.append(month)
        for transaction in transactions:
            for posting in transaction.postings:
                key = (posting.account.name, month)
                if key in cells:
                    cells[key] = cells[key] + posting.amount
                else:
                    cells[key] = posting.amount
    return BalanceChanges(months=tuple(months), cells=cells)


__all__ = ["summarize", "transactions_by_month", "balance_changes"]
