"""
Deterministic tie-break between equally large families.

Order (first wins):
  1) more BLANK slots (fewer letters revealed, harder for the guesser)
  2) lexicographically smaller key

Keys are compared by value only, so the winner never depends on the order in
which families were discovered.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Tuple

from .families import BLANK


def blank_count(key: str) -> int:
    return key.count(BLANK)


def tie_break_order(key: str) -> Tuple[int, str]:
    """Sort key: smaller means harder."""
    return -blank_count(key), key


def break_tie(keys: Iterable[str]) -> str:
    keys = list(keys)
    if not keys:
        raise ValueError("break_tie() needs at least one key")
    return min(keys, key=tie_break_order)


def hardest_key(counts: Mapping[str, int]) -> str:
    """
    Key of the largest family; ties resolved by `break_tie`.

    Raises ValueError on an empty table.
    """
    if not counts:
        raise ValueError("no families to choose from")
    top = max(counts.values())
    return break_tie(k for k, n in counts.items() if n == top)
