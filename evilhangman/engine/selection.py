"""
Family selection policy.

HARD always keeps the hardest family. MEDIUM and EASY keep the
second-hardest on every guess whose ordinal is a multiple of their
relaxation period (see difficulty.py), provided more than one family exists.
"""

from __future__ import annotations

from typing import Mapping

from .difficulty import Difficulty, relaxation_period
from .tiebreak import hardest_key


def second_hardest_key(counts: Mapping[str, int]) -> str:
    """
    Drop the hardest family, then pick the hardest of what is left.

    This is a fresh computation over the remainder (full tie-break again),
    not the runner-up of the first pass.
    """
    hardest = hardest_key(counts)
    rest = {k: n for k, n in counts.items() if k != hardest}
    if not rest:
        raise ValueError("second_hardest_key() needs at least two families")
    return hardest_key(rest)


def select_family(counts: Mapping[str, int], ordinal: int, difficulty: Difficulty) -> str:
    """
    Choose the surviving family key.

    Args:
      counts     : family table (key -> member count)
      ordinal    : 1-based number of this guess within the round
      difficulty : round difficulty
    """
    if ordinal < 1:
        raise ValueError(f"ordinal must be >= 1; got {ordinal}")

    period = relaxation_period(difficulty)
    if period is not None and ordinal % period == 0 and len(counts) > 1:
        return second_hardest_key(counts)
    return hardest_key(counts)
