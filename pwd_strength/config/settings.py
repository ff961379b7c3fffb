"""
Application settings snapshot.

Collects everything pwd_strength reads from the environment into one typed
object, for applications that want to log or inject configuration at startup.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pwd_strength.config.env import get_evaluation_delay_sec, resolve_blacklist_path
from pwd_strength.pwd_logging.logger import LOG_FORMAT, LOG_LEVEL


@dataclass(frozen=True)
class Settings:
    """Configuration in effect for the current process."""

    blacklist_path: Path
    evaluation_delay_sec: float
    log_level: str
    log_format: str


def get_settings() -> Settings:
    """
    Return the current settings.

    Blacklist path and delay are re-read from the environment on each call;
    log level and format are fixed when logging is configured.
    """
    return Settings(
        blacklist_path=resolve_blacklist_path(),
        evaluation_delay_sec=get_evaluation_delay_sec(),
        log_level=LOG_LEVEL,
        log_format=LOG_FORMAT,
    )
