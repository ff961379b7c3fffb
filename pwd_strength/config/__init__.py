"""
Configuration management for pwd_strength.

Reads settings from environment variables and an optional .env file.
"""

from pwd_strength.config.env import (  # noqa: F401
    get_evaluation_delay_sec,
    resolve_blacklist_path,
)
from pwd_strength.config.settings import Settings, get_settings  # noqa: F401

__all__ = [
    "Settings",
    "get_evaluation_delay_sec",
    "get_settings",
    "resolve_blacklist_path",
]
