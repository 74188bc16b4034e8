"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for locating and reading the journal.

    Attributes:
        journal_file: Path to the journal file, if one is configured.
        default_account: Account used when a report is run without one.
        encoding: Text encoding of the journal file.
    """

    journal_file: Optional[Path] = None
    default_account: Optional[str] = None
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        raw_journal = os.getenv("LEDGER_FILE")
        if raw_journal:
            journal_file = cls._normalize_path(raw_journal, logger=logger)
        else:
            journal_file = cls._default_journal_file(logger=logger)
        default_account = os.getenv("LEDGER_DEFAULT_ACCOUNT", "").strip()
        encoding = os.getenv("LEDGER_ENCODING", "utf-8").strip() or "utf-8"
        return cls(
            journal_file=journal_file,
            default_account=default_account or None,
            encoding=encoding,
        )

    @staticmethod
    def _normalize_path(
        raw_path: str,
        logger,
    ) -> Path | None:
        """Normalize the journal file path or ``file://`` URI.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path | None: Resolved filesystem path, or None for URIs with a
            scheme other than ``file``.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme and len(parsed.scheme) > 1 and parsed.scheme != "file":
            logger.warning(
                f"Unsupported journal location '{raw_path}'. "
                "Only local paths and file:// URIs are supported."
            )
            return None
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Journal file does not exist at {path}")
        return path

    @staticmethod
    def _default_journal_file(logger) -> Path | None:
        """Return a default journal path when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single journal is found in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.journal"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .journal files found in data/. "
                "Set LEDGER_FILE to choose one."
            )
        return None


__all__ = ["LedgerSettings"]
