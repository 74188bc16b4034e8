"""Domain constants for journal parsing."""

CURRENCY_SYMBOL = "$"

MINOR_UNIT_SCALE = 2

ACCOUNT_SEPARATOR = ":"

COMMENT_MARKERS = (";", "#")

INLINE_COMMENT_MARKER = ";"

DATE_SEPARATOR = "/"

DATE_FORMAT = "%Y/%m/%d"

POSTING_INDENT = "    "


__all__ = [
    "CURRENCY_SYMBOL",
    "MINOR_UNIT_SCALE",
    "ACCOUNT_SEPARATOR",
    "COMMENT_MARKERS",
    "INLINE_COMMENT_MARKER",
    "DATE_SEPARATOR",
    "DATE_FORMAT",
    "POSTING_INDENT",
]
