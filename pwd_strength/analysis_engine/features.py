"""
Character-class feature extraction from password text.

Converts a password into a CharacterProfile: which of the four character
classes are present, how many special characters it has, and how many
distinct code points. No scoring logic; the variety section and the scorer
both read the same profile so their classification cannot drift apart.
"""

from __future__ import annotations

from dataclasses import dataclass

# Fixed reporting order for missing classes
CLASS_UPPERCASE = "uppercase"
CLASS_LOWERCASE = "lowercase"
CLASS_NUMBERS = "numbers"
CLASS_SPECIAL = "special characters"


def is_special(char: str) -> bool:
    """Anything that is not a letter or number, unicode-aware."""
    return not char.isalnum()


def is_decimal_digit(char: str) -> bool:
    return "0" <= char <= "9"


@dataclass(frozen=True)
class CharacterProfile:
    """
    Character-class view of a password.

    Lengths count code points, not bytes.
    """

    length: int
    has_upper: bool
    has_lower: bool
    has_digit: bool
    has_special: bool
    special_count: int
    unique_count: int

    @property
    def variety_count(self) -> int:
        """Number of the four classes present (0-4)."""
        return sum((self.has_upper, self.has_lower, self.has_digit, self.has_special))

    @property
    def missing_classes(self) -> list[str]:
        """Absent classes, always in uppercase, lowercase, numbers, special order."""
        missing: list[str] = []
        if not self.has_upper:
            missing.append(CLASS_UPPERCASE)
        if not self.has_lower:
            missing.append(CLASS_LOWERCASE)
        if not self.has_digit:
            missing.append(CLASS_NUMBERS)
        if not self.has_special:
            missing.append(CLASS_SPECIAL)
        return missing


def extract_profile(password: str) -> CharacterProfile:
    special_count = sum(1 for c in password if is_special(c))
    return CharacterProfile(
        length=len(password),
        has_upper=any(c.isupper() for c in password),
        has_lower=any(c.islower() for c in password),
        has_digit=any(is_decimal_digit(c) for c in password),
        has_special=special_count > 0,
        special_count=special_count,
        unique_count=len(set(password)),
    )
