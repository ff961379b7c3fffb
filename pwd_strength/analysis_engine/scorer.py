"""
Password score computation.

score = length bonus + variety bonus + extra length bonus + multi-special bonus
+ uniqueness bonus - penalty per reason, clamped to 0-100 by PasswordScore.
The running sum may leave [0, 100] before the clamp; the clamp is final.
A blacklisted password is capped just below MEDIUM so it always rates WEAK.
"""

from __future__ import annotations

from collections.abc import Sequence

from pwd_strength.analysis_engine.features import extract_profile
from pwd_strength.analysis_engine.models import MEDIUM_THRESHOLD, PasswordScore
from pwd_strength.analysis_engine.sections import REASON_BLACKLISTED

LENGTH_BONUS_PER_CHAR = 0.5
LENGTH_BONUS_CAP = 20.0
VARIETY_BONUS_PER_CLASS = 15

# (length strictly above, bonus), checked in order
EXTRA_LENGTH_BONUSES = ((16, 10), (12, 5))

MULTI_SPECIAL_MIN = 2
MULTI_SPECIAL_BONUS = 5

# (distinct characters at least, bonus), checked in order
UNIQUENESS_BONUSES = ((16, 10), (12, 5))

PENALTY_PER_REASON = 10
BLACKLISTED_SCORE_CAP = MEDIUM_THRESHOLD - 1


def compute_score(password: str, reasons: Sequence[str]) -> PasswordScore:
    """
    Score a password that went through every section.

    Args:
        password: Plain password text; only its character statistics are used.
        reasons: Deficiency reasons collected by the sections.

    Returns:
        Clamped PasswordScore.
    """
    profile = extract_profile(password)

    score = int(min(profile.length * LENGTH_BONUS_PER_CHAR, LENGTH_BONUS_CAP))
    score += profile.variety_count * VARIETY_BONUS_PER_CLASS

    for above, bonus in EXTRA_LENGTH_BONUSES:
        if profile.length > above:
            score += bonus
            break

    if profile.special_count >= MULTI_SPECIAL_MIN:
        score += MULTI_SPECIAL_BONUS

    for at_least, bonus in UNIQUENESS_BONUSES:
        if profile.unique_count >= at_least:
            score += bonus
            break

    score -= len(reasons) * PENALTY_PER_REASON
    if REASON_BLACKLISTED in reasons:
        score = min(score, BLACKLISTED_SCORE_CAP)
    return PasswordScore(score)
