"""Infer the omitted posting amount and enforce the zero-sum invariant."""

from logging import Logger

from src.domain.errors import AmbiguousBalanceError, UnbalancedTransactionError
from src.domain.models.amount import sum_amounts
from src.domain.models.journal import (
    CandidateTransaction,
    Posting,
    Transaction,
)


def balance_transaction(
    candidate: CandidateTransaction,
    logger: Logger | None = None,
) -> Transaction:
    """Produce a balanced transaction from a parsed candidate.

    When one posting omits its amount, it receives the negated sum of the
    other postings and keeps its position. Otherwise the postings must
    already sum to exactly zero.

    Args:
        candidate: Parsed transaction with at most one unspecified amount.
        logger: Optional logger used for warnings.

    Returns:
        Transaction: Transaction whose postings all carry an amount.

    Raises:
        AmbiguousBalanceError: If more than one amount is unspecified.
        UnbalancedTransactionError: If fully specified postings do not sum
            to zero.
    """
    if candidate.unspecified_count > 1:
        raise AmbiguousBalanceError(
            "only one posting may omit its amount",
            line_number=candidate.line_number,
        )

    known_total = sum_amounts(
        posting.amount
        for posting in candidate.postings
        if posting.amount is not None
    )

    if candidate.unspecified_count == 0:
        if not known_total.is_zero():
            raise UnbalancedTransactionError(
                known_total,
                line_number=candidate.line_number,
            )
        postings = tuple(
            Posting(account=posting.account, amount=posting.amount)
            for posting in candidate.postings
        )
    else:
        inferred = -known_total
        if inferred.is_zero() and logger is not None:
            logger.warning(
                f"Inferred a zero amount for the transaction at line "
                f"{candidate.line_number} ({candidate.description!r})"
            )
        postings = tuple(
            Posting(
                account=posting.account,
                amount=posting.amount if posting.amount is not None else inferred,
            )
            for posting in candidate.postings
        )

    return Transaction(
        date=candidate.date,
        description=candidate.description,
        postings=postings,
        line_number=candidate.line_number,
    )


__all__ = ["balance_transaction"]
