"""Immutable word collection a manager draws its rounds from."""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, Iterator, List, Tuple

from .errors import InvalidArgumentError


class Dictionary:
    """
    Ordered, de-duplicated, read-only word collection.

    Case and character-set validation is left to whoever loads the words
    (see evilhangman.datasets). Words must not contain BLANK ('-'): a
    hyphen slot would read as unrevealed for the whole round, so a word like
    "x-ray" could never be solved. validate_wordlist flags such lines as
    invalid.
    """

    def __init__(self, words: Iterable[str] | None):
        if words is None or isinstance(words, str):
            raise InvalidArgumentError("words must be a non-empty collection of strings")

        # dict.fromkeys keeps first-seen order while dropping repeats
        self._words: Tuple[str, ...] = tuple(dict.fromkeys(words))
        if not self._words:
            raise InvalidArgumentError("words must be a non-empty collection of strings")

        self._length_counts: Dict[int, int] = dict(Counter(len(w) for w in self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"Dictionary({len(self._words)} words, lengths={self.lengths()})"

    def count_for_length(self, length: int) -> int:
        return self._length_counts.get(length, 0)

    def words_of_length(self, length: int) -> List[str]:
        return [w for w in self._words if len(w) == length]

    def lengths(self) -> List[int]:
        """Distinct word lengths present, ascending."""
        return sorted(self._length_counts)
