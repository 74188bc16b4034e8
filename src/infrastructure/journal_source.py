"""Journal source adapters."""

from pathlib import Path

from src.infrastructure.logging.logger import get_app_logger


class FileJournalSource:
    """Read a journal from a text file on disk."""

    def __init__(
        self,
        path: Path | str,
        encoding: str = "utf-8",
        logger=None,
    ) -> None:
        """Initialize the source.

        Args:
            path: Filesystem path of the journal.
            encoding: Text encoding of the file.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._path = Path(path)
        self._encoding = encoding
        self._logger = logger or get_app_logger()

    @property
    def location(self) -> str:
        return str(self._path)

    def read_text(self) -> str:
        """Return the decoded file content.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        if not self._path.is_file():
            raise FileNotFoundError(f"Journal file not found: {self._path}")
        text = self._path.read_text(encoding=self._encoding)
        self._logger.info(
            f"Read {len(text.splitlines())} lines from {self._path}"
        )
        return text


class InMemoryJournalSource:
    """Serve journal text already held in memory, e.g. an uploaded file."""

    def __init__(self, text: str, location: str = "<memory>") -> None:
        self._text = text
        self._location = location

    @property
    def location(self) -> str:
        return self._location

    def read_text(self) -> str:
        return self._text


__all__ = ["FileJournalSource", "InMemoryJournalSource"]
