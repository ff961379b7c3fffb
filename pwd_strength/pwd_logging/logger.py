"""
Structured logging for evaluation and blacklist events.

structlog with ISO timestamps and an event_type key. Every module uses
get_logger(__name__) and logs an event_type as the first argument.

Passwords must never reach a log line. Call sites only log metadata
(section names, counts, tiers); the redaction processor is the backstop:
any field whose name mentions a password or secret is replaced before
rendering, including keys in bound context.

Uses only Python stdlib logging and structlog; no pwd_strength imports to avoid circular imports.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL_VALUE = getattr(logging, LOG_LEVEL, logging.INFO)

# JSON output for production (LOG_FORMAT=json); human-readable for local
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").strip().lower()

# Matched case-insensitively as substrings of field names
SENSITIVE_KEY_PARTS = ("password", "passwd", "pwd", "secret")
REDACTED = "[REDACTED]"


def _is_sensitive_key(key: str) -> bool:
    lowered = key.lower()
    return any(part in lowered for part in SENSITIVE_KEY_PARTS)


def redact_sensitive(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Replace the value of every password-like field with a fixed marker."""
    for key in list(event_dict):
        if key in ("event", "event_type", "logger"):
            continue
        if _is_sensitive_key(key):
            event_dict[key] = REDACTED
    return event_dict


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _event_type(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog's positional 'event' becomes event_type."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    return event_dict


def build_processors(log_format: str = LOG_FORMAT) -> list[Any]:
    """
    Processor chain shared by the process-wide configuration and tests.

    Redaction runs first, so no later processor or renderer sees a secret value.
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        redact_sensitive,
        structlog.processors.add_log_level,
        structlog.processors.format_exc_info,
        _add_timestamp,
        _event_type,
    ]
    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
        )
    return processors


def configure_structlog() -> None:
    structlog.configure(
        processors=build_processors(),
        wrapper_class=structlog.make_filtering_bound_logger(LOG_LEVEL_VALUE),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger for the given module name.

        logger = get_logger(__name__)
        logger.info("blacklist_initialized", count=10000, path="./assets/blacklist.txt")

    Output (JSON): {"count": 10000, "event_type": "blacklist_initialized",
    "level": "info", "logger": "module.name", "path": "...", "timestamp": "..."}
    """
    return structlog.get_logger(name).bind(logger=name)
