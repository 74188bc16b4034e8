"""Domain models for hierarchical account names."""

from dataclasses import dataclass

from src.domain.constants import ACCOUNT_SEPARATOR


@dataclass(frozen=True)
class AccountPath:
    """Account name split into its ``:``-delimited segments.

    ``assets:savings`` becomes ``("assets", "savings")``. Two paths are equal
    only when every segment matches exactly.
    """

    segments: tuple[str, ...]

    @classmethod
    def parse(cls, text: str) -> "AccountPath":
        """Parse an account name into a path.

        Args:
            text: Account name as written in the journal.

        Returns:
            AccountPath: Parsed path.

        Raises:
            ValueError: If the name is empty.
        """
        cleaned = text.strip()
        if not cleaned:
            raise ValueError("Account name cannot be empty")
        return cls(tuple(cleaned.split(ACCOUNT_SEPARATOR)))

    @property
    def name(self) -> str:
        """Return the full account name."""
        return ACCOUNT_SEPARATOR.join(self.segments)

    @property
    def depth(self) -> int:
        return len(self.segments)

    @property
    def parent(self) -> "AccountPath | None":
        """Return the enclosing account, or None for a top-level account."""
        if self.depth <= 1:
            return None
        return AccountPath(self.segments[:-1])

    def is_ancestor_of(self, other: "AccountPath") -> bool:
        """Return True when ``other`` is a strict descendant of this path."""
        return (
            other.depth > self.depth
            and other.segments[: self.depth] == self.segments
        )

    def contains(self, other: "AccountPath") -> bool:
        """Return True when ``other`` is this account or one of its children."""
        return other == self or self.is_ancestor_of(other)

    def __str__(self) -> str:
        return self.name


__all__ = ["AccountPath"]
