"""Tests for line classification and block grouping."""

import pytest

from src.domain.errors import StructureError
from src.domain.services.lexer import (
    LineKind,
    classify_line,
    classify_lines,
    iter_blocks,
    strip_inline_comment,
)


def test_classify_line_kinds() -> None:
    """Blank, comment, header and posting lines are told apart."""
    assert classify_line("", 1).kind is LineKind.BLANK
    assert classify_line("   \t", 2).kind is LineKind.BLANK
    assert classify_line("; note", 3).kind is LineKind.COMMENT
    assert classify_line("    # indented note", 4).kind is LineKind.COMMENT
    assert classify_line("2023/03/01 Coffee", 5).kind is LineKind.HEADER
    posting = classify_line("    assets:cash  $5", 6)
    assert posting.kind is LineKind.POSTING
    assert posting.content == "assets:cash  $5"
    assert posting.number == 6


def test_classify_line_strips_inline_comments() -> None:
    """Text after an inline semicolon is dropped."""
    header = classify_line("2023/03/03 Coffee  ; flat white", 1)
    assert header.content == "2023/03/03 Coffee"
    posting = classify_line("    assets:cash  $-4.50 ; card", 2)
    assert posting.content == "assets:cash  $-4.50"


def test_strip_inline_comment_leaves_plain_text() -> None:
    """Lines without a comment are unchanged."""
    assert strip_inline_comment("assets:cash  $1") == "assets:cash  $1"


def test_unindented_non_header_line_is_rejected() -> None:
    """An unindented posting raises with its line number."""
    with pytest.raises(StructureError) as excinfo:
        classify_line("assets:cash  $5", 7)
    assert excinfo.value.line_number == 7


def test_classify_lines_numbers_from_one() -> None:
    """Line numbers start at one and a trailing newline adds no line."""
    lines = list(classify_lines("; c\n\n2023/01/01 x\n"))
    assert [line.number for line in lines] == [1, 2, 3]


def test_classify_lines_accepts_crlf() -> None:
    """Windows line endings are stripped before classification."""
    lines = list(classify_lines("2023/01/01 x\r\n    a  $1\r\n"))
    assert [line.kind for line in lines] == [LineKind.HEADER, LineKind.POSTING]
    assert lines[1].content == "a  $1"


@pytest.mark.parametrize("separator", ["\x0c", "\x1c", "\x85", "\u2028"])
def test_only_newline_ends_a_line(separator: str) -> None:
    """Other Unicode line breaks stay inside the description."""
    text = f"2023/01/01 Cafe{separator}Bar\n    a  $1\n    b\n"

    lines = list(classify_lines(text))

    assert [line.number for line in lines] == [1, 2, 3]
    assert lines[0].content == f"2023/01/01 Cafe{separator}Bar"


def test_iter_blocks_groups_postings_under_headers() -> None:
    """Comments inside a block are skipped and blank lines close it."""
    text = (
        "; leading comment\n"
        "2023/03/01 One\n"
        "    a  $1\n"
        "    ; comment inside a block\n"
        "    b\n"
        "\n"
        "\n"
        "2023/03/02 Two\n"
        "    c  $2\n"
        "    d"
    )
    blocks = list(iter_blocks(classify_lines(text)))
    assert len(blocks) == 2
    assert blocks[0].header.number == 2
    assert [p.content for p in blocks[0].postings] == ["a  $1", "b"]
    assert [p.number for p in blocks[1].postings] == [9, 10]


def test_new_header_closes_open_block() -> None:
    """A header directly after postings starts a new block."""
    text = "2023/03/01 One\n    a  $1\n2023/03/02 Two\n    b  $2\n"
    blocks = list(iter_blocks(classify_lines(text)))
    assert [block.header.number for block in blocks] == [1, 3]


def test_posting_outside_block_is_rejected() -> None:
    """A posting after a blank line has no open transaction."""
    text = "2023/03/01 One\n    a  $1\n    b\n\n    c  $2\n"
    with pytest.raises(StructureError) as excinfo:
        list(iter_blocks(classify_lines(text)))
    assert excinfo.value.line_number == 5


def test_empty_text_yields_no_blocks() -> None:
    """Empty or comment-only journals have no blocks."""
    assert list(iter_blocks(classify_lines(""))) == []
    assert list(iter_blocks(classify_lines("; only comments\n\n"))) == []
