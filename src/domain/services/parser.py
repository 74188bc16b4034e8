"""Parse transaction blocks into candidate transactions.

Posting lines are split into an account and an optional amount token. The
account ends at the first run of two or more spaces (or a tab); when there is
no such run, a trailing ``$``-prefixed token after a single space is still
read as the amount, with or without one space after the ``$`` (``$50`` or
``$ 50``). Anything left after the account must be a well-formed amount.
Amounts are converted to minor units with integer arithmetic only.
"""

import re
from datetime import date

from src.domain.constants import (
    CURRENCY_SYMBOL,
    DATE_SEPARATOR,
    MINOR_UNIT_SCALE,
)
from src.domain.errors import (
    AmbiguousBalanceError,
    AmountFormatError,
    DateFormatError,
    StructureError,
)
from src.domain.models.accounts import AccountPath
from src.domain.models.amount import Amount
from src.domain.models.journal import CandidatePosting, CandidateTransaction
from src.domain.services.lexer import ClassifiedLine, TransactionBlock

_FIELD_SEPARATOR = re.compile(r"\t|\s{2,}")
_TRAILING_AMOUNT = re.compile(r" (\$ ?\S*)$")
_NUMBER = re.compile(r"(?P<sign>[+-]?)(?P<whole>[0-9]+)(?:\.(?P<fraction>[0-9]+))?")


def parse_date(token: str, line_number: int | None = None) -> date:
    """Parse a ``YYYY/MM/DD`` date.

    Args:
        token: Date text from a header line.
        line_number: Line number used in error reports.

    Returns:
        date: The parsed calendar date.

    Raises:
        DateFormatError: On a wrong segment count, non-numeric segments or an
            impossible calendar date.
    """
    segments = token.split(DATE_SEPARATOR)
    if len(segments) != 3:
        raise DateFormatError(
            f"expected a YYYY/MM/DD date, got {token!r}",
            line_number=line_number,
        )
    if not all(segment.isascii() and segment.isdigit() for segment in segments):
        raise DateFormatError(
            f"date segments must be numeric: {token!r}",
            line_number=line_number,
        )
    year, month, day = segments
    if len(year) != 4 or len(month) > 2 or len(day) > 2:
        raise DateFormatError(
            f"expected a YYYY/MM/DD date, got {token!r}",
            line_number=line_number,
        )
    try:
        return date(int(year), int(month), int(day))
    except ValueError as exc:
        raise DateFormatError(
            f"invalid calendar date {token!r}: {exc}",
            line_number=line_number,
        ) from exc


def parse_header(line: ClassifiedLine) -> tuple[date, str]:
    """Split a header line into its date and description.

    Args:
        line: Classified header line.

    Returns:
        tuple[date, str]: Transaction date and trimmed description.
    """
    parts = line.content.split(None, 1)
    transaction_date = parse_date(parts[0], line_number=line.number)
    description = parts[1].strip() if len(parts) > 1 else ""
    return transaction_date, description


def parse_amount(token: str, line_number: int | None = None) -> Amount:
    """Parse a ``$``-prefixed amount such as ``$-6.76`` or ``$50``.

    Args:
        token: Amount text.
        line_number: Line number used in error reports.

    Returns:
        Amount: Parsed amount in minor units.

    Raises:
        AmountFormatError: On a missing currency symbol, a malformed sign or
            number, or more than two fractional digits.
    """
    text = token.strip()
    if not text.startswith(CURRENCY_SYMBOL):
        raise AmountFormatError(
            f"amount must start with {CURRENCY_SYMBOL!r}: {token!r}",
            line_number=line_number,
        )
    number = text[len(CURRENCY_SYMBOL):]
    if number.startswith(" "):
        number = number[1:]

    match = _NUMBER.fullmatch(number)
    if match is None:
        raise AmountFormatError(
            f"malformed amount {token!r}",
            line_number=line_number,
        )
    fraction = match.group("fraction") or ""
    if len(fraction) > MINOR_UNIT_SCALE:
        raise AmountFormatError(
            f"amount {token!r} has more than {MINOR_UNIT_SCALE} "
            "fractional digits",
            line_number=line_number,
        )
    minor_units = int(match.group("whole")) * 10**MINOR_UNIT_SCALE + int(
        fraction.ljust(MINOR_UNIT_SCALE, "0")
    )
    if match.group("sign") == "-":
        minor_units = -minor_units
    return Amount(minor_units, CURRENCY_SYMBOL)


def split_posting(content: str) -> tuple[str, str]:
    """Split posting text into account text and amount text.

    Args:
        content: Posting line content without indentation.

    Returns:
        tuple[str, str]: Account text and amount text (empty when omitted).
    """
    separator = _FIELD_SEPARATOR.search(content)
    if separator is not None:
        return content[: separator.start()], content[separator.end():].strip()

    trailing = _TRAILING_AMOUNT.search(content)
    if trailing is not None and trailing.start() > 0:
        return content[: trailing.start()].rstrip(), trailing.group(1)
    return content, ""


def parse_posting(line: ClassifiedLine) -> CandidatePosting:
    """Parse one posting line.

    Args:
        line: Classified posting line.

    Returns:
        CandidatePosting: Account path and amount, or None when omitted.
    """
    account_text, amount_text = split_posting(line.content.strip())
    if not account_text or account_text.startswith(CURRENCY_SYMBOL):
        raise StructureError(
            f"posting is missing an account name: {line.content!r}",
            line_number=line.number,
        )
    amount = (
        parse_amount(amount_text, line_number=line.number)
        if amount_text
        else None
    )
    return CandidatePosting(
        account=AccountPath.parse(account_text),
        amount=amount,
        line_number=line.number,
    )


def parse_block(block: TransactionBlock) -> CandidateTransaction:
    """Parse a transaction block.

    Args:
        block: Header plus posting lines.

    Returns:
        CandidateTransaction: Parsed transaction, not yet balanced.

    Raises:
        StructureError: If the block has fewer than two postings.
        AmbiguousBalanceError: If more than one posting omits its amount.
    """
    transaction_date, description = parse_header(block.header)
    if len(block.postings) < 2:
        raise StructureError(
            "transaction needs at least two postings",
            line_number=block.header.number,
        )

    postings: list[CandidatePosting] = []
    unspecified_line: int | None = None
    for line in block.postings:
        posting = parse_posting(line)
        if posting.amount is None:
            if unspecified_line is not None:
                raise AmbiguousBalanceError(
                    "only one posting may omit its amount "
                    f"(lines {unspecified_line} and {line.number})",
                    line_number=line.number,
                )
            unspecified_line = line.number
        postings.append(posting)

    return CandidateTransaction(
        date=transaction_date,
        description=description,
        postings=tuple(postings),
        line_number=block.header.number,
    )


__all__ = [
    "parse_date",
    "parse_header",
    "parse_amount",
    "split_posting",
    "parse_posting",
    "parse_block",
]
