"""
Application-level exceptions.

Blacklist loading reports configuration problems through this hierarchy.
None of them is retried internally; the caller fixes configuration and
calls init again.
"""

from __future__ import annotations

from pathlib import Path


class PwdStrengthError(Exception):
    """Base class for all pwd_strength errors."""


class BlacklistError(PwdStrengthError):
    """Blacklist could not be loaded."""


class BlacklistFileNotFoundError(BlacklistError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Blacklist file not found: {path}")


class BlacklistReadError(BlacklistError):
    """The file exists but reading or decoding it failed; `cause` holds the underlying error."""

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read blacklist file: {cause}")


class BlacklistEmptyFileError(BlacklistError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__("Blacklist file is empty")
