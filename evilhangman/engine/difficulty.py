"""
Difficulty levels and their relaxation periods.

HARD always keeps the biggest family. EASY and MEDIUM periodically hand the
guesser the second-hardest family instead: every EASY_RELAXATION_PERIOD-th
guess on EASY, every MEDIUM_RELAXATION_PERIOD-th guess on MEDIUM.
"""

from __future__ import annotations

from enum import Enum

from .errors import InvalidArgumentError

EASY_RELAXATION_PERIOD = 2
MEDIUM_RELAXATION_PERIOD = 4


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value) -> "Difficulty":
        """Accept a Difficulty member or its (case-insensitive) name/value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise InvalidArgumentError(
            f"Unknown difficulty: {value!r}. Available: {[d.value for d in cls]}")


def relaxation_period(difficulty: Difficulty) -> int | None:
    """
    How often (in guess ordinals) the selector relaxes to the second-hardest
    family. None means never.
    """
    if difficulty is Difficulty.HARD:
        return None
    elif difficulty is Difficulty.MEDIUM:
        return MEDIUM_RELAXATION_PERIOD
    elif difficulty is Difficulty.EASY:
        return EASY_RELAXATION_PERIOD
    raise InvalidArgumentError(f"Unknown difficulty: {difficulty!r}")
