"""Line classification and transaction block grouping.

Journal text is processed in two lazy stages:

* ``classify_lines`` tags each physical line as a header, posting, comment or
  blank line;
* ``iter_blocks`` runs a two-state machine (outside / inside a transaction)
  over the classified lines and yields one block per transaction.

A blank line or the end of the input closes the open block. Comment lines are
skipped without closing it.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from src.domain.constants import COMMENT_MARKERS, INLINE_COMMENT_MARKER
from src.domain.errors import StructureError


class LineKind(Enum):
    HEADER = "header"
    POSTING = "posting"
    COMMENT = "comment"
    BLANK = "blank"


@dataclass(frozen=True)
class ClassifiedLine:
    """A physical line of journal text with its classification.

    Attributes:
        kind: Line classification.
        number: 1-based line number in the source text.
        content: Line text with any inline comment removed. Posting content
            is stripped of its indentation.
    """

    kind: LineKind
    number: int
    content: str


@dataclass(frozen=True)
class TransactionBlock:
    """Header line plus the posting lines that follow it."""

    header: ClassifiedLine
    postings: tuple[ClassifiedLine, ...]


class _BlockState(Enum):
    OUTSIDE = "outside"
    INSIDE = "inside"


def strip_inline_comment(line: str) -> str:
    """Drop everything from the first inline comment marker onwards."""
    return line.split(INLINE_COMMENT_MARKER, 1)[0].rstrip()


def classify_line(line: str, number: int) -> ClassifiedLine:
    """Classify a single physical line.

    Args:
        line: Raw line text without its line terminator.
        number: 1-based line number.

    Returns:
        ClassifiedLine: The classified line.

    Raises:
        StructureError: If a non-indented line is neither a header nor a
            comment.
    """
    stripped = line.strip()
    if not stripped:
        return ClassifiedLine(LineKind.BLANK, number, "")
    if stripped[0] in COMMENT_MARKERS:
        return ClassifiedLine(LineKind.COMMENT, number, stripped)

    content = strip_inline_comment(line)
    if line[0].isdigit():
        return ClassifiedLine(LineKind.HEADER, number, content)
    if line[0].isspace():
        return ClassifiedLine(LineKind.POSTING, number, content.strip())
    raise StructureError(
        f"posting lines must be indented: {line!r}",
        line_number=number,
    )


def classify_lines(text: str) -> Iterator[ClassifiedLine]:
    """Lazily classify every line of a journal.

    Only ``\\n`` (optionally preceded by ``\\r``) ends a line; other Unicode
    line separators are kept as ordinary characters.

    Args:
        text: Full journal text, already decoded.

    Yields:
        ClassifiedLine: One entry per physical line, in order.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for number, line in enumerate(lines, start=1):
        yield classify_line(line.removesuffix("\r"), number)


def iter_blocks(lines: Iterable[ClassifiedLine]) -> Iterator[TransactionBlock]:
    """Group classified lines into transaction blocks.

    Args:
        lines: Classified lines in input order.

    Yields:
        TransactionBlock: One block per transaction header.

    Raises:
        StructureError: If a posting line appears outside a transaction.
    """
    state = _BlockState.OUTSIDE
    header: ClassifiedLine | None = None
    postings: list[ClassifiedLine] = []

    for line in lines:
        if line.kind is LineKind.COMMENT:
            continue

        if line.kind is LineKind.HEADER:
            if state is _BlockState.INSIDE:
                yield TransactionBlock(header, tuple(postings))
            header = line
            postings = []
            state = _BlockState.INSIDE
        elif line.kind is LineKind.POSTING:
            if state is _BlockState.OUTSIDE:
                raise StructureError(
                    "posting line outside of a transaction",
                    line_number=line.number,
                )
            postings.append(line)
        elif state is _BlockState.INSIDE:
            yield TransactionBlock(header, tuple(postings))
            header = None
            postings = []
            state = _BlockState.OUTSIDE

    if state is _BlockState.INSIDE:
        yield TransactionBlock(header, tuple(postings))


__all__ = [
    "LineKind",
    "ClassifiedLine",
    "TransactionBlock",
    "strip_inline_comment",
    "classify_line",
    "classify_lines",
    "iter_blocks",
]
