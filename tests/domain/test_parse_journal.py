"""Tests for the end-to-end journal parsing pipeline."""

from unittest.mock import MagicMock

import pytest

from src.domain.errors import (
    AmbiguousBalanceError,
    AmountFormatError,
    DateFormatError,
    JournalError,
    StructureError,
    UnbalancedTransactionError,
)
from src.domain.models.amount import Amount
from src.domain.services.journal import parse_journal


def test_opening_balance_is_inferred() -> None:
    """The omitted equity amount is the negated sum of the others."""
    text = (
        "2023/03/01 Opening balances\n"
        "    assets:cash                $50.00\n"
        "    assets:savings           $1000.00\n"
        "    equity:opening-balances\n"
    )

    ledger = parse_journal(text)

    (transaction,) = ledger.transactions()
    assert str(transaction.postings[2].amount) == "$-1050.00"
    assert transaction.line_number == 1


def test_parsing_is_deterministic() -> None:
    """The same text always parses to the same ledger."""
    text = "2023/03/02 Pay\n    assets:savings  $2000\n    income:salary\n"
    assert parse_journal(text) == parse_journal(text)


def test_empty_and_comment_only_journals_are_empty() -> None:
    """Journals without transactions give an empty ledger."""
    assert parse_journal("").transaction_count() == 0
    comments_only = "; nothing here\n# or here\n\n"
    assert parse_journal(comments_only).transaction_count() == 0


def test_unbalanced_transaction_reports_remainder_and_position() -> None:
    """The error names the line, index and remainder."""
    text = (
        "2023/03/01 Fine\n"
        "    a  $1\n"
        "    b\n"
        "\n"
        "2023/03/05 Sandwich\n"
        "    expenses:food    $14.99\n"
        "    assets:savings  $-14.98\n"
    )
    with pytest.raises(UnbalancedTransactionError) as excinfo:
        parse_journal(text)

    error = excinfo.value
    assert error.remainder == Amount(1)
    assert error.line_number == 5
    assert error.transaction_index == 1
    assert str(error) == (
        "line 5 (transaction #1): transaction does not balance, "
        "remainder is $0.01"
    )


@pytest.mark.parametrize(
    ("text", "error_type", "line_number"),
    [
        ("2023/13/01 Bad month\n    a  $1\n    b\n", DateFormatError, 1),
        ("2023/01/01 x\n    a  $1.001\n    b\n", AmountFormatError, 2),
        ("2023/01/01 x\n    a  $1\n", StructureError, 1),
        ("2023/01/01 x\n    a\n    b\n", AmbiguousBalanceError, 3),
        ("2023/01/01 x\n    a  $1\nb  $-1\n", StructureError, 3),
    ],
)
def test_errors_carry_line_numbers(text, error_type, line_number) -> None:
    """Every journal error points at the offending line."""
    with pytest.raises(error_type) as excinfo:
        parse_journal(text)
    assert excinfo.value.line_number == line_number


def test_one_bad_transaction_aborts_the_whole_parse() -> None:
    """No partial ledger is returned when a later transaction fails."""
    text = (
        "2023/01/01 ok\n    a  $1\n    b\n\n"
        "2023/01/02 ok\n    a  $2\n    b\n\n"
        "2023/01/03 bad\n    a  $3\n    b  $3\n"
    )
    with pytest.raises(JournalError) as excinfo:
        parse_journal(text)
    assert excinfo.value.transaction_index == 2


def test_zero_inference_warns_through_logger() -> None:
    """An inferred zero amount is reported on the given logger."""
    logger = MagicMock()
    text = "2023/01/01 wash\n    a  $5\n    a  $-5\n    b\n"

    ledger = parse_journal(text, logger=logger)

    assert ledger.transactions()[0].postings[2].amount.is_zero()
    logger.warning.assert_called_once()


def test_ten_dollars_against_nine_ninety_nine_is_off_by_a_cent() -> None:
    """Cent arithmetic detects a one cent imbalance."""
    text = "2023/03/05 x\n    a  $10.00\n    b  $-9.99\n"
    with pytest.raises(UnbalancedTransactionError) as excinfo:
        parse_journal(text)
    assert str(excinfo.value.remainder) == "$0.01"


def test_every_parsed_transaction_sums_to_zero() -> None:
    """All accepted transactions have a zero total."""
    text = (
        "2023/01/01 a\n    x  $1.11\n    y  $2.22\n    z\n\n"
        "2023/01/02 b\n    x  $-3.33\n    y  $3.33\n\n"
        "2023/01/03 c\n    z  $0.07\n    x\n"
    )
    for transaction in parse_journal(text).transactions():
        assert transaction.total().is_zero()


def test_huge_amounts_off_by_cents_are_unbalanced() -> None:
    """Thirty-digit amounts are compared exactly, without rounding."""
    text = (
        "2023/01/01 Big\n"
        "    a  $1234567890123456789012345678.91\n"
        "    b  $-1234567890123456789012345678.99\n"
    )
    with pytest.raises(UnbalancedTransactionError) as excinfo:
        parse_journal(text)
    assert excinfo.value.remainder == Amount(-8)
    assert str(excinfo.value.remainder) == "$-0.08"


def test_unicode_line_separator_stays_in_description() -> None:
    """Only newline characters split the journal into lines."""
    text = "2023/01/01 Cafe\u2028Bar\x0c\n    a  $1\n    b\n"

    ledger = parse_journal(text)

    (transaction,) = ledger.transactions()
    assert transaction.description == "Cafe\u2028Bar"
    assert transaction.postings[1].amount == Amount(-100)


def test_crlf_journal_parses_like_lf() -> None:
    """Windows line endings give the same ledger as Unix ones."""
    text = "2023/01/01 x\n    a  $1\n    b\n"
    assert parse_journal(text.replace("\n", "\r\n")) == parse_journal(text)
