"""
Common-password blacklist: loading from a line-delimited file and membership checks.
"""

from pwd_strength.blacklist.store import BlacklistStore, parse_blacklist

__all__ = ["BlacklistStore", "parse_blacklist"]
