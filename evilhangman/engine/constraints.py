"""
Candidate filtering given what the guesser has seen.

Given:
  - a pool of words (e.g., the dictionary words of one length)
  - the current revealed pattern
  - the letters guessed so far

Return:
  - words that are consistent with ALL of it: every revealed slot matches,
    and no guessed letter sits in a slot that is still blank.

The engine keeps its own pool consistent by construction; this module is the
outside view of the same invariant. Guessers use it to reason about what the
secret could be, and tests use it to check the engine.
"""

from typing import Iterable, List

from .families import BLANK


def is_consistent(word: str, pattern: str, guessed: Iterable[str]) -> bool:
    """
    True if `word` could still be the secret for this pattern/guess history.

    Examples:
      is_consistent("cat", "-a-", "a")  -> True
      is_consistent("boa", "-a-", "a")  -> False   (revealed slot mismatch)
      is_consistent("can", "-a-", "an") -> False   ('n' guessed but blank)
    """
    if len(word) != len(pattern):
        return False

    guessed = set(guessed)
    for ch, shown in zip(word, pattern):
        if shown != BLANK:
            if ch != shown:
                return False
        elif ch in guessed:
            # A guessed letter in a blank slot would have been revealed.
            return False
    return True


def filter_candidates(words: Iterable[str], pattern: str, guessed: Iterable[str]) -> List[str]:
    """
    Keep only words consistent with `pattern` and `guessed`
    (order preserved as in `words`).
    """
    guessed = set(guessed)
    return [w for w in words if is_consistent(w, pattern, guessed)]
