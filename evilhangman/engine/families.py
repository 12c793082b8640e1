"""
Guess evaluation: split the candidate pool into families.

For each candidate word we build a response key of length L:
  - the guessed letter wherever the word has it
  - the already-revealed letter wherever the pattern shows one
  - BLANK ('-') everywhere else

Words with identical keys form a family. Families partition the pool
completely and disjointly. Because revealed slots are copied into every key,
a key never "un-reveals" a letter the guesser already has.

Tables are returned ordered ascending by key so debug output and tests are
stable; the selection step does not depend on that order.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List

BLANK = "-"

# key -> member words (in pool order)
Families = Dict[str, List[str]]


def response_key(word: str, letter: str, pattern: str) -> str:
    """
    Response key of `word` for a guess of `letter` given the current pattern.

    Examples:
      response_key("cat", "a", "---") -> "-a-"
      response_key("boa", "a", "---") -> "--a"
      response_key("bat", "t", "-a-") -> "-at"
    """
    assert len(word) == len(pattern), "Word and pattern must be the same length"

    key = []
    for ch, shown in zip(word, pattern):
        if ch == letter:
            key.append(letter)
        elif shown != BLANK:
            key.append(shown)
        else:
            key.append(BLANK)
    return "".join(key)


def partition(candidates: Iterable[str], letter: str, pattern: str) -> Families:
    """
    Group `candidates` by response key. Member order inside each family
    follows the order of `candidates`.
    """
    groups: Dict[str, List[str]] = defaultdict(list)
    for w in candidates:
        groups[response_key(w, letter, pattern)].append(w)
    return {k: groups[k] for k in sorted(groups)}


def family_counts(families: Families) -> Dict[str, int]:
    """key -> number of members, same order as `families`."""
    return {k: len(members) for k, members in families.items()}
