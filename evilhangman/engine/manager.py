"""
HangmanManager: the adversarial ("evil") hangman engine.

The manager never commits to a secret word. It keeps every dictionary word
still consistent with the guesses so far and, on each guess, keeps the family
that is worst for the guesser (HARD), or occasionally the second-worst
(MEDIUM/EASY).

Per guess:
  1) partition the pool by response key           (families.partition)
  2) pick a family per difficulty                 (selection.select_family)
  3) resolve ties deterministically               (tiebreak)
  4) fold the key into the pattern, count misses  (RoundState.apply)

Typical use:
    mgr = HangmanManager(words, seed=7)
    mgr.prepare_round(5, guess_budget=8, difficulty=Difficulty.HARD)
    while not mgr.is_over():
        mgr.make_guess(next_letter())
    print(mgr.secret_word())
"""

from __future__ import annotations

import logging
import random
from typing import Dict, Iterable, List, Tuple

from .dictionary import Dictionary
from .difficulty import Difficulty
from .errors import InvalidArgumentError, InvalidStateError
from .families import Families, family_counts, partition
from .round import RoundState
from .selection import select_family

logger = logging.getLogger(__name__)


def _check_letter(letter) -> str:
    if not isinstance(letter, str) or len(letter) != 1:
        raise InvalidArgumentError(f"guess must be a single character; got {letter!r}")
    return letter


class HangmanManager:

    def __init__(self, words: Iterable[str] | None, *, seed: int | None = None):
        self.dictionary = Dictionary(words)
        self.rng = random.Random(seed)
        self._round: RoundState | None = None
        logger.debug("manager created: %r", self.dictionary)

    # ---- round lifecycle ----

    def prepare_round(self, length: int, guess_budget: int, difficulty) -> None:
        """
        Start a new round, discarding any previous one.

        Raises InvalidArgumentError if the dictionary has no word of `length`,
        `guess_budget` < 1, or `difficulty` is not a known level.
        """
        if self.dictionary.count_for_length(length) <= 0:
            raise InvalidArgumentError(f"no dictionary words of length {length}")
        if guess_budget < 1:
            raise InvalidArgumentError(f"guess_budget must be >= 1; got {guess_budget}")
        difficulty = Difficulty.parse(difficulty)

        self._round = RoundState.fresh(
            self.dictionary.words_of_length(length), length, guess_budget, difficulty)
        logger.debug("round prepared: length=%d budget=%d difficulty=%s candidates=%d",
                     length, guess_budget, difficulty.value, len(self._round.candidates))

    def _require_round(self) -> RoundState:
        if self._round is None:
            raise InvalidStateError("no round in progress; call prepare_round() first")
        return self._round

    # ---- queries ----

    def candidate_count_for_length(self, length: int) -> int:
        """Number of dictionary words of `length` (round-independent)."""
        return self.dictionary.count_for_length(length)

    def candidate_count(self) -> int:
        return len(self._require_round().candidates)

    def candidates(self) -> Tuple[str, ...]:
        """Read-only copy of the current candidate pool."""
        return tuple(self._require_round().candidates)

    def guesses_left(self) -> int:
        return self._require_round().guesses_left

    def wrong_guesses(self) -> int:
        return self._require_round().wrong_guesses

    def guessed_letters(self) -> List[str]:
        """Letters guessed this round, ascending."""
        return self._require_round().guessed_letters()

    def already_guessed(self, letter: str) -> bool:
        return self._require_round().already_guessed(letter)

    def pattern(self) -> str:
        return self._require_round().pattern

    def word_length(self) -> int:
        return self._require_round().length

    def difficulty(self) -> Difficulty:
        return self._require_round().difficulty

    def is_solved(self) -> bool:
        """True once every slot of the pattern is revealed."""
        return self._require_round().is_solved()

    def is_over(self) -> bool:
        state = self._require_round()
        return state.is_solved() or state.guesses_left <= 0

    # ---- guessing ----

    def evaluate(self, letter: str) -> Families:
        """
        Partition the current pool for `letter` without committing anything.

        Raises InvalidStateError if `letter` was already guessed this round.
        """
        state = self._require_round()
        _check_letter(letter)
        if state.already_guessed(letter):
            raise InvalidStateError(f"letter {letter!r} was already guessed this round")
        return partition(state.candidates, letter, state.pattern)

    def make_guess(self, letter: str) -> Dict[str, int]:
        """
        Guess `letter`, keep the family the difficulty policy selects, and
        update pattern / wrong-guess count.

        Returns:
          The full family table (key -> member count), ascending by key.
          Useful for testing and debugging.

        All preconditions are checked before anything changes, so a failed
        call leaves the round untouched.
        """
        state = self._require_round()
        if state.guesses_left <= 0:
            raise InvalidStateError("no guesses left in this round")
        families = self.evaluate(letter)

        counts = family_counts(families)
        ordinal = state.next_ordinal
        chosen = select_family(counts, ordinal, state.difficulty)
        wrong = state.apply(letter, chosen, families[chosen])

        logger.debug("guess #%d %r: %d families, kept %r (%d words)%s",
                     ordinal, letter, len(counts), chosen, counts[chosen],
                     " [wrong]" if wrong else "")
        return counts

    def secret_word(self) -> str:
        """
        Draw one word uniformly from the current pool.

        Not memoized: while the pool has more than one word, repeated calls
        may return different words.
        """
        state = self._require_round()
        if not state.candidates:
            raise InvalidStateError("candidate pool is empty")
        return state.candidates[self.rng.randrange(len(state.candidates))]
