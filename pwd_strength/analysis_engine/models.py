"""
Data models for evaluation input and output.

PasswordScore, PasswordStrength and PasswordEvaluation are what callers get
back; SectionOutcome is what each analyzer hands to the pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

SCORE_MIN = 0
SCORE_MAX = 100

# Lower bound of each tier; checked from the top down
MEDIUM_THRESHOLD = 50
STRONG_THRESHOLD = 70
EPIC_THRESHOLD = 85
GOD_THRESHOLD = 95


class PasswordStrength(str, Enum):
    NOT_EVALUATED = "not_evaluated"
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    EPIC = "epic"
    GOD = "god"


@dataclass(frozen=True, order=True)
class PasswordScore:
    """Score in [0, 100]. Out-of-range input is clamped on construction."""

    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", max(SCORE_MIN, min(SCORE_MAX, int(self.value))))

    def __int__(self) -> int:
        return self.value

    @property
    def strength(self) -> PasswordStrength:
        if self.value >= GOD_THRESHOLD:
            return PasswordStrength.GOD
        if self.value >= EPIC_THRESHOLD:
            return PasswordStrength.EPIC
        if self.value >= STRONG_THRESHOLD:
            return PasswordStrength.STRONG
        if self.value >= MEDIUM_THRESHOLD:
            return PasswordStrength.MEDIUM
        return PasswordStrength.WEAK


@dataclass(frozen=True)
class PasswordEvaluation:
    """
    Result of one evaluation.

    score is None when the evaluation was cancelled or a section failed
    fatally; callers must treat that as "not available" rather than weak.
    reasons follow section order, with any "Evaluation cancelled" or "Error"
    marker last.
    """

    score: PasswordScore | None
    reasons: tuple[str, ...] = ()

    @property
    def strength(self) -> PasswordStrength:
        if self.score is None:
            return PasswordStrength.NOT_EVALUATED
        return self.score.strength

    @property
    def is_evaluated(self) -> bool:
        return self.score is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score.value if self.score is not None else None,
            "strength": self.strength.value,
            "reasons": list(self.reasons),
        }


class SectionStatus(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    FATAL = "fatal"


@dataclass(frozen=True)
class SectionOutcome:
    """
    Result of a single analyzer.

    FAILED carries the human-readable deficiency reason. FATAL means the
    analyzer itself could not complete; it is not a weakness finding.
    """

    status: SectionStatus
    reason: str | None = None

    def __post_init__(self) -> None:
        if self.status is SectionStatus.FAILED and not self.reason:
            raise ValueError("failed section outcome requires a reason")

    @classmethod
    def passed(cls) -> SectionOutcome:
        return cls(SectionStatus.PASSED)

    @classmethod
    def failed(cls, reason: str) -> SectionOutcome:
        return cls(SectionStatus.FAILED, reason)

    @classmethod
    def fatal(cls) -> SectionOutcome:
        return cls(SectionStatus.FATAL)
