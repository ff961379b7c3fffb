"""
Core utilities: exceptions and cancellation shared by the blacklist store
and the evaluation pipeline.
"""

from pwd_strength.core.cancellation import CancellationSignal, CancellationToken
from pwd_strength.core.exceptions import (
    BlacklistEmptyFileError,
    BlacklistError,
    BlacklistFileNotFoundError,
    BlacklistReadError,
    PwdStrengthError,
)

__all__ = [
    "BlacklistEmptyFileError",
    "BlacklistError",
    "BlacklistFileNotFoundError",
    "BlacklistReadError",
    "CancellationSignal",
    "CancellationToken",
    "PwdStrengthError",
]
