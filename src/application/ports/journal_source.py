"""Application port for reading journal text."""

from typing import Protocol


class JournalSourcePort(Protocol):
    """Port exposing the raw text of one journal document."""

    @property
    def location(self) -> str:
        """Return a human-readable description of where the text lives."""

    def read_text(self) -> str:
        """Return the full, decoded journal text."""


__all__ = ["JournalSourcePort"]
