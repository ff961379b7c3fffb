"""
Tests for pwd_logging: import without circular imports, and redaction of
password-like fields before rendering.
"""

from __future__ import annotations

import json

import structlog

from pwd_strength.pwd_logging.logger import REDACTED, build_processors, redact_sensitive


def _json_logger():
    """Logger with the production JSON chain that returns the rendered line."""
    return structlog.wrap_logger(
        structlog.ReturnLogger(),
        processors=build_processors("json"),
        wrapper_class=structlog.BoundLogger,
    )


def test_logging_import():
    """get_logger returns a usable bound logger bound to the module name."""
    from pwd_strength.pwd_logging import get_logger

    logger = get_logger("pwd_strength.test")
    for level in ("debug", "info", "warning", "error"):
        assert callable(getattr(logger, level))
    logger.info("test_message", key="value")


def test_json_line_has_event_type_and_level():
    """Rendered lines carry event_type, level and timestamp."""
    line = json.loads(_json_logger().info("blacklist_initialized", count=4))
    assert line["event_type"] == "blacklist_initialized"
    assert line["level"] == "info"
    assert line["count"] == 4
    assert "timestamp" in line
    assert "event" not in line


def test_password_fields_never_rendered():
    """password, pwd and secret fields are replaced before the renderer runs."""
    rendered = _json_logger().error(
        "evaluation_section_raised",
        password="hunter2",
        new_pwd="Tr0ub4dor&3",
        client_secret="s3cr3t",
        section="length",
    )
    assert "hunter2" not in rendered
    assert "Tr0ub4dor&3" not in rendered
    assert "s3cr3t" not in rendered
    line = json.loads(rendered)
    assert line["password"] == REDACTED
    assert line["new_pwd"] == REDACTED
    assert line["client_secret"] == REDACTED
    assert line["section"] == "length"


def test_bound_password_context_is_redacted():
    """Values bound earlier are redacted too."""
    rendered = _json_logger().bind(Password="letmein").info("evaluation_about_to_start")
    assert "letmein" not in rendered


def test_redact_sensitive_leaves_other_fields():
    """Non-sensitive fields and the event name pass through untouched."""
    event = {"event": "evaluation_completed", "score": 65, "strength": "medium"}
    assert redact_sensitive(None, "info", dict(event)) == event


def test_package_import_exposes_public_api():
    """Top-level package re-exports the store, evaluator and error types."""
    import pwd_strength

    assert pwd_strength.__version__
    assert pwd_strength.__doc__.strip().startswith("pwd_strength: advisory")
    for name in pwd_strength.__all__:
        assert hasattr(pwd_strength, name)
