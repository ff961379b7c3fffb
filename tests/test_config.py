"""
Tests for environment-driven configuration (config.env, config.settings).
"""

from __future__ import annotations

from pathlib import Path

from pwd_strength.config import get_evaluation_delay_sec, get_settings, resolve_blacklist_path
from pwd_strength.config.env import DEFAULT_BLACKLIST_PATH, DEFAULT_EVALUATION_DELAY_SEC, load_pwd_env


def test_resolve_blacklist_path_default():
    """Without PWD_BLACKLIST_PATH the default relative path is used."""
    assert resolve_blacklist_path() == Path("./assets/blacklist.txt")
    assert DEFAULT_BLACKLIST_PATH == Path("./assets/blacklist.txt")


def test_resolve_blacklist_path_from_env(monkeypatch):
    """PWD_BLACKLIST_PATH overrides the default."""
    monkeypatch.setenv("PWD_BLACKLIST_PATH", "/custom/path/blacklist.txt")
    assert resolve_blacklist_path() == Path("/custom/path/blacklist.txt")


def test_resolve_blacklist_path_does_no_io(monkeypatch):
    """A non-existent override is returned as-is; existence is checked at init."""
    monkeypatch.setenv("PWD_BLACKLIST_PATH", "/nonexistent/blacklist.txt")
    assert not resolve_blacklist_path().exists()


def test_evaluation_delay_default_and_override(monkeypatch):
    """Delay defaults to 300 ms; a valid env value overrides it."""
    assert get_evaluation_delay_sec() == DEFAULT_EVALUATION_DELAY_SEC == 0.3
    monkeypatch.setenv("PWD_EVALUATION_DELAY_SEC", "0.05")
    assert get_evaluation_delay_sec() == 0.05


def test_evaluation_delay_invalid_falls_back(monkeypatch):
    """Unparsable or negative delays fall back to the default."""
    monkeypatch.setenv("PWD_EVALUATION_DELAY_SEC", "soon")
    assert get_evaluation_delay_sec() == DEFAULT_EVALUATION_DELAY_SEC
    monkeypatch.setenv("PWD_EVALUATION_DELAY_SEC", "-1")
    assert get_evaluation_delay_sec() == DEFAULT_EVALUATION_DELAY_SEC


def test_get_settings_snapshot(monkeypatch):
    """Settings reflects the environment at call time."""
    monkeypatch.setenv("PWD_BLACKLIST_PATH", "/etc/pwd/blacklist.txt")
    monkeypatch.setenv("PWD_EVALUATION_DELAY_SEC", "0")
    settings = get_settings()
    assert settings.blacklist_path == Path("/etc/pwd/blacklist.txt")
    assert settings.evaluation_delay_sec == 0.0
    assert settings.log_level
    assert settings.log_format


def test_dotenv_is_loaded_once_per_process(monkeypatch):
    """Repeated lookups read .env a single time."""
    loads: list[Path] = []
    monkeypatch.setattr("pwd_strength.config.env.load_pwd_env", load_pwd_env)
    monkeypatch.setattr("pwd_strength.config.env.load_dotenv", lambda path: loads.append(path))
    load_pwd_env.cache_clear()
    try:
        resolve_blacklist_path()
        resolve_blacklist_path()
        get_evaluation_delay_sec()
    finally:
        load_pwd_env.cache_clear()
    assert len(loads) == 1
