"""
Environment variable loading for pwd_strength.

- PWD_BLACKLIST_PATH: blacklist file location (default: ./assets/blacklist.txt)
- PWD_EVALUATION_DELAY_SEC: delay before async evaluation (default: 0.3)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is pwd_strength/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

BLACKLIST_PATH_ENV = "PWD_BLACKLIST_PATH"
EVALUATION_DELAY_ENV = "PWD_EVALUATION_DELAY_SEC"

DEFAULT_BLACKLIST_PATH = Path("./assets/blacklist.txt")
DEFAULT_EVALUATION_DELAY_SEC = 0.3


@lru_cache(maxsize=1)
def load_pwd_env() -> None:
    """Load .env from project root once per process; later calls are no-ops. Missing file is ignored."""
    load_dotenv(_ENV_PATH)


def resolve_blacklist_path() -> Path:
    """
    Return the blacklist file path.

    Order: PWD_BLACKLIST_PATH > ./assets/blacklist.txt. No file I/O on the blacklist itself.
    """
    load_pwd_env()
    raw = os.getenv(BLACKLIST_PATH_ENV)
    if raw:
        return Path(raw)
    return DEFAULT_BLACKLIST_PATH


def get_evaluation_delay_sec() -> float:
    """
    Return PWD_EVALUATION_DELAY_SEC as seconds.
    Missing, unparsable or negative values fall back to the default.
    """
    load_pwd_env()
    raw = (os.getenv(EVALUATION_DELAY_ENV) or "").strip()
    if not raw:
        return DEFAULT_EVALUATION_DELAY_SEC
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_EVALUATION_DELAY_SEC
    if value < 0:
        return DEFAULT_EVALUATION_DELAY_SEC
    return value
