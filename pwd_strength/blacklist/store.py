"""
Blacklist store: the set of known-weak passwords consulted during evaluation.

Constructed explicitly by the application at startup and passed to the
evaluator. Population happens at most once; after that the set is a frozenset
that readers check without taking a lock. The write lock only serializes
competing init() calls, so exactly one of them loads the file.
"""

from __future__ import annotations

import os
import threading
from pathlib import Path

from pwd_strength.config.env import resolve_blacklist_path
from pwd_strength.core.exceptions import (
    BlacklistEmptyFileError,
    BlacklistFileNotFoundError,
    BlacklistReadError,
)
from pwd_strength.pwd_logging import get_logger

logger = get_logger(__name__)


def parse_blacklist(content: str) -> frozenset[str]:
    """One entry per newline-separated line; lines are trimmed and lower-cased, blank lines dropped."""
    entries = (line.strip().lower() for line in content.split("\n"))
    return frozenset(entry for entry in entries if entry)


class BlacklistStore:
    """
    Read-mostly set of common passwords, matched case-insensitively.

    An uninitialized store knows of no blacklisted passwords: is_member()
    returns False instead of failing, so evaluation still runs when loading
    was skipped or failed.
    """

    def __init__(self) -> None:
        self._entries: frozenset[str] | None = None
        self._write_lock = threading.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._entries is not None

    def __len__(self) -> int:
        entries = self._entries
        return len(entries) if entries is not None else 0

    def init(self, path: str | os.PathLike[str] | None = None) -> int:
        """
        Load the blacklist and return the number of distinct entries.

        With no path, resolves PWD_BLACKLIST_PATH (default ./assets/blacklist.txt).
        Idempotent: once loaded, returns the current size without touching the
        filesystem, whatever path is passed.

        Raises:
            BlacklistFileNotFoundError: path does not exist.
            BlacklistReadError: path exists but could not be read as UTF-8 text.
            BlacklistEmptyFileError: file has no content after trimming whitespace.
        """
        entries = self._entries
        if entries is not None:
            logger.debug("blacklist_init_skipped_already_loaded", count=len(entries))
            return len(entries)

        with self._write_lock:
            entries = self._entries
            if entries is not None:
                logger.debug("blacklist_init_skipped_already_loaded", count=len(entries))
                return len(entries)

            resolved = Path(path) if path is not None else resolve_blacklist_path()
            entries = self._load(resolved)
            self._entries = entries

        logger.info("blacklist_initialized", count=len(entries), path=str(resolved))
        return len(entries)

    def _load(self, path: Path) -> frozenset[str]:
        if not path.exists():
            logger.error("blacklist_file_not_found", path=str(path))
            raise BlacklistFileNotFoundError(path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("blacklist_read_failed", path=str(path), error=str(e))
            raise BlacklistReadError(path, e) from e
        if not content.strip():
            logger.error("blacklist_file_empty", path=str(path))
            raise BlacklistEmptyFileError(path)
        return parse_blacklist(content)

    def is_member(self, password: str) -> bool:
        """True if the lower-cased password is blacklisted; False when not initialized."""
        entries = self._entries
        if entries is None:
            return False
        return password.lower() in entries

    def snapshot(self) -> frozenset[str] | None:
        """Return the loaded entries, or None if init() has not succeeded yet."""
        return self._entries
