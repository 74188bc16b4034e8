"""In-memory ledger of balanced transactions."""

from collections.abc import Callable, Iterable, Iterator

from src.domain.errors import UnbalancedTransactionError
from src.domain.models.accounts import AccountPath
from src.domain.models.journal import Posting, Transaction


class Ledger:
    """Ordered, append-only collection of balanced transactions.

    Transactions keep input order. There is no removal or in-place edit; a
    changed journal is re-parsed into a new ledger.
    """

    def __init__(self, transactions: Iterable[Transaction] = ()) -> None:
        self._transactions: list[Transaction] = []
        for transaction in transactions:
            self.add(transaction)

    def add(self, transaction: Transaction) -> None:
        """Append a transaction after re-checking that it balances.

        Args:
            transaction: Balanced transaction to append.

        Raises:
            UnbalancedTransactionError: If the postings do not sum to zero.
        """
        total = transaction.total()
        if not total.is_zero():
            raise UnbalancedTransactionError(
                total,
                line_number=transaction.line_number,
                transaction_index=len(self._transactions),
            )
        self._transactions.append(transaction)

    def transactions(self) -> tuple[Transaction, ...]:
        """Return a read-only view of the transactions in input order."""
        return tuple(self._transactions)

    def postings_for(
        self,
        predicate: Callable[[AccountPath], bool],
    ) -> Iterator[tuple[Transaction, Posting]]:
        """Yield ``(transaction, posting)`` pairs whose account matches.

        Args:
            predicate: Callable applied to each posting's account path.

        Yields:
            tuple[Transaction, Posting]: Matching pairs in ledger order.
        """
        for _, transaction, posting in self.indexed_postings_for(predicate):
            yield transaction, posting

    def indexed_postings_for(
        self,
        predicate: Callable[[AccountPath], bool],
    ) -> Iterator[tuple[int, Transaction, Posting]]:
        """Like ``postings_for``, with the 0-based transaction position."""
        for index, transaction in enumerate(self._transactions):
            for posting in transaction.postings:
                if predicate(posting.account):
                    yield index, transaction, posting

    def transaction_count(self) -> int:
        """Return the number of transactions in the ledger."""
        return len(self._transactions)

    def transaction_count_for(
        self,
        predicate: Callable[[AccountPath], bool],
    ) -> int:
        """Return how many transactions have at least one matching posting."""
        return sum(
            1
            for transaction in self._transactions
            if any(predicate(posting.account) for posting in transaction.postings)
        )

    def accounts(self) -> list[str]:
        """Return every account name used by a posting, sorted."""
        return sorted(
            {
                posting.account.name
                for transaction in self._transactions
                for posting in transaction.postings
            }
        )

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(tuple(self._transactions))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ledger):
            return NotImplemented
        return self._transactions == other._transactions

    def __repr__(self) -> str:
        return f"Ledger(transactions={len(self._transactions)})"


__all__ = ["Ledger"]
