"""
Per-round mutable state.

A RoundState is built fresh by HangmanManager.prepare_round and then updated
in place, once per guess, by `apply`. Invariant kept throughout a round:
every candidate has `length` letters, matches each revealed slot of
`pattern`, and has no guessed letter in a blank slot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .difficulty import Difficulty
from .pattern import blank_pattern, is_revealed, overlay


@dataclass
class RoundState:
    length: int
    guess_budget: int
    difficulty: Difficulty
    candidates: List[str]
    pattern: str
    guessed: List[str] = field(default_factory=list)  # insertion order
    wrong_guesses: int = 0

    @classmethod
    def fresh(cls, words: List[str], length: int, guess_budget: int,
              difficulty: Difficulty) -> "RoundState":
        return cls(
            length=length,
            guess_budget=guess_budget,
            difficulty=difficulty,
            candidates=list(words),
            pattern=blank_pattern(length),
        )

    @property
    def guesses_left(self) -> int:
        return self.guess_budget - self.wrong_guesses

    @property
    def next_ordinal(self) -> int:
        """1-based ordinal the next guess will have."""
        return len(self.guessed) + 1

    def guessed_letters(self) -> List[str]:
        return sorted(self.guessed)

    def already_guessed(self, letter: str) -> bool:
        return letter in self.guessed

    def is_solved(self) -> bool:
        return is_revealed(self.pattern)

    def apply(self, letter: str, key: str, members: List[str]) -> bool:
        """
        Commit a guess: shrink the pool to the chosen family, fold its key
        into the pattern, record the letter. Returns True if the guess was
        wrong (the pattern did not change).
        """
        old = self.pattern
        self.candidates = list(members)
        self.pattern = overlay(old, key)
        wrong = self.pattern == old
        if wrong:
            self.wrong_guesses += 1
        self.guessed.append(letter)
        return wrong
