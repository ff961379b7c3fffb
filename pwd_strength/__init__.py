"""
pwd_strength: advisory password strength evaluation.

Runs a fixed pipeline of sections (common-password blacklist, minimum length,
character variety, repetitive/sequential patterns) and turns the result into
a 0-100 score and a strength tier. Pure and side-effect free: passwords are
never stored, transmitted or logged.

Typical startup:

    store = BlacklistStore()
    store.init()  # PWD_BLACKLIST_PATH or ./assets/blacklist.txt
    evaluation = evaluate_password_strength("MyP@ssw0rd!", store)
"""

__version__ = "0.1.0"

from pwd_strength.analysis_engine import (  # noqa: E402
    PasswordEvaluation,
    PasswordEvaluator,
    PasswordScore,
    PasswordStrength,
    evaluate_password_strength,
    evaluate_password_strength_async,
)
from pwd_strength.blacklist import BlacklistStore  # noqa: E402
from pwd_strength.config import resolve_blacklist_path  # noqa: E402
from pwd_strength.core import (  # noqa: E402
    BlacklistEmptyFileError,
    BlacklistError,
    BlacklistFileNotFoundError,
    BlacklistReadError,
    CancellationToken,
)

__all__ = [
    "BlacklistEmptyFileError",
    "BlacklistError",
    "BlacklistFileNotFoundError",
    "BlacklistReadError",
    "BlacklistStore",
    "CancellationToken",
    "PasswordEvaluation",
    "PasswordEvaluator",
    "PasswordScore",
    "PasswordStrength",
    "evaluate_password_strength",
    "evaluate_password_strength_async",
    "resolve_blacklist_path",
]
