"""
Pytest fixtures for pwd_strength tests. Blacklists are written to tmp_path;
configuration environment variables are cleared for every test.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from pwd_strength.blacklist import BlacklistStore

COMMON_PASSWORDS = ["password", "123456", "qwerty", "admin"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Unset pwd_strength variables so a developer's shell or .env cannot leak in."""
    monkeypatch.delenv("PWD_BLACKLIST_PATH", raising=False)
    monkeypatch.delenv("PWD_EVALUATION_DELAY_SEC", raising=False)
    monkeypatch.setattr("pwd_strength.config.env.load_pwd_env", lambda: None)


@pytest.fixture
def write_blacklist(tmp_path):
    """Factory: write lines to a blacklist file under tmp_path and return its path."""

    def _write(lines: list[str], name: str = "blacklist.txt") -> Path:
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def store(write_blacklist):
    """BlacklistStore loaded with four common passwords."""
    s = BlacklistStore()
    s.init(write_blacklist(COMMON_PASSWORDS))
    return s
