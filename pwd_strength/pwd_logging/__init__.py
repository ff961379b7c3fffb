"""
Structured logging for pwd_strength.

Logs with timestamp, level and event_type. Use get_logger() in every module.
"""

from pwd_strength.pwd_logging.logger import get_logger

__all__ = ["get_logger"]
