"""Errors raised while parsing and balancing a journal.

Every error aborts the parse of the whole journal. Errors carry the 1-based
line number of the offending line and, once the failing block is known, the
0-based index of the transaction being built.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from src.domain.models.amount import Amount


class JournalError(Exception):
    """Base class for journal parsing errors."""

    def __init__(
        self,
        message: str,
        *,
        line_number: int | None = None,
        transaction_index: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line_number = line_number
        self.transaction_index = transaction_index

    def __str__(self) -> str:
        location = []
        if self.line_number is not None:
            location.append(f"line {self.line_number}")
        if self.transaction_index is not None:
            location.append(f"(transaction #{self.transaction_index})")
        if not location:
            return self.message
        return f"{' '.join(location)}: {self.message}"


class StructureError(JournalError):
    """Malformed block structure."""


class DateFormatError(JournalError):
    """A transaction header date cannot be parsed."""


class AmountFormatError(JournalError):
    """An amount token is present but malformed."""


class AmbiguousBalanceError(JournalError):
    """More than one posting of a transaction omits its amount."""


class UnbalancedTransactionError(JournalError):
    """Fully specified postings do not sum to zero.

    Attributes:
        remainder: The non-zero sum of the postings.
    """

    def __init__(
        self,
        remainder: "Amount",
        *,
        line_number: int | None = None,
        transaction_index: int | None = None,
    ) -> None:
        super().__init__(
            f"transaction does not balance, remainder is {remainder}",
            line_number=line_number,
            transaction_index=transaction_index,
        )
        self.remainder = remainder


__all__ = [
    "JournalError",
    "StructureError",
    "DateFormatError",
    "AmountFormatError",
    "AmbiguousBalanceError",
    "UnbalancedTransactionError",
]
