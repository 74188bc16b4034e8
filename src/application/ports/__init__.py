"""Application ports package."""

from .journal_source import JournalSourcePort

__all__ = ["JournalSourcePort"]
