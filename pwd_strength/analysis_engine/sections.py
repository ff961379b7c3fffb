"""
Rule-based password sections (analyzers).

Each section inspects the password and returns a SectionOutcome: passed, or
failed with a human-readable reason. Sections are stateless apart from the
blacklist store they read, and run in the order build_sections() returns:
blacklist, length, variety, pattern. Reason order in the evaluation follows
that order, so reordering here is an observable change.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pwd_strength.analysis_engine.features import extract_profile
from pwd_strength.analysis_engine.models import SectionOutcome
from pwd_strength.blacklist.store import BlacklistStore

REASON_BLACKLISTED = "Password is in the top 10,000 most common"
REASON_REPETITIVE = "Password contains repetitive patterns"
REASON_SEQUENTIAL = "Password contains sequential patterns"

MIN_LENGTH = 8
MIN_PATTERN_LENGTH = 3
# Identical consecutive characters that count as repetition
REPEAT_RUN = 3
# Window sizes scanned for +1/-1 code point runs, in order
SEQUENCE_WINDOWS = (4, 5)


class Section(ABC):
    """One analyzer in the evaluation pipeline."""

    name: str

    @abstractmethod
    def analyze(self, password: str) -> SectionOutcome:
        raise NotImplementedError


class BlacklistSection(Section):
    name = "blacklist"

    def __init__(self, store: BlacklistStore) -> None:
        self._store = store

    def analyze(self, password: str) -> SectionOutcome:
        if self._store.is_member(password):
            return SectionOutcome.failed(REASON_BLACKLISTED)
        return SectionOutcome.passed()


class LengthSection(Section):
    name = "length"

    def __init__(self, min_length: int = MIN_LENGTH) -> None:
        self.min_length = min_length

    def analyze(self, password: str) -> SectionOutcome:
        if len(password) < self.min_length:
            return SectionOutcome.failed(
                f"Password must be at least {self.min_length} characters"
            )
        return SectionOutcome.passed()


class VarietySection(Section):
    """Requires uppercase, lowercase, a decimal digit and a special character."""

    name = "variety"

    def analyze(self, password: str) -> SectionOutcome:
        missing = extract_profile(password).missing_classes
        if missing:
            return SectionOutcome.failed(f"Missing: {', '.join(missing)}")
        return SectionOutcome.passed()


def _has_repetition(chars: str, run: int = REPEAT_RUN) -> bool:
    count = 1
    for prev, curr in zip(chars, chars[1:]):
        if curr == prev:
            count += 1
            if count >= run:
                return True
        else:
            count = 1
    return False


def _is_sequential(window: str) -> bool:
    """Every adjacent pair steps by +1, or every pair by -1."""
    steps = {ord(curr) - ord(prev) for prev, curr in zip(window, window[1:])}
    return steps == {1} or steps == {-1}


def _has_sequence(chars: str, window_sizes: tuple[int, ...] = SEQUENCE_WINDOWS) -> bool:
    for size in window_sizes:
        for start in range(len(chars) - size + 1):
            if _is_sequential(chars[start:start + size]):
                return True
    return False


class PatternSection(Section):
    """
    Flags runs of 3+ identical characters ("aaa") and, failing that,
    4-5 character ascending or descending code point runs ("1234", "dcba").
    Repetition wins when both are present. Passwords under 3 characters pass.
    """

    name = "pattern"

    def analyze(self, password: str) -> SectionOutcome:
        if len(password) < MIN_PATTERN_LENGTH:
            return SectionOutcome.passed()
        if _has_repetition(password):
            return SectionOutcome.failed(REASON_REPETITIVE)
        if _has_sequence(password):
            return SectionOutcome.failed(REASON_SEQUENTIAL)
        return SectionOutcome.passed()


def build_sections(store: BlacklistStore) -> tuple[Section, ...]:
    """Default pipeline, cheapest and most decisive first."""
    return (
        BlacklistSection(store),
        LengthSection(),
        VarietySection(),
        PatternSection(),
    )
