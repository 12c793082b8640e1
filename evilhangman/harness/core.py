"""
Simulation harness core primitives.

- run_round: play one round of evil hangman with an automated guesser.
- run_batch: play many rounds in sequence (reusing one manager).
- summarize: aggregate per-round results into headline numbers.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or tests without changes.
"""

from __future__ import annotations
import time
from typing import Callable, Dict, List, Tuple

import numpy as np

from evilhangman.engine import Difficulty, HangmanManager

DEFAULT_GUESS_BUDGET = 8
DEFAULT_WORD_LENGTH = 5


def run_round(
        manager: HangmanManager,
        guesser,
        *,
        length: int = DEFAULT_WORD_LENGTH,
        guess_budget: int = DEFAULT_GUESS_BUDGET,
        difficulty: Difficulty = Difficulty.HARD,
        seed: int | None = None,
) -> Dict:
    """
    Play one round until the pattern is fully revealed or the guess budget
    is spent.

    Args:
        manager:       engine instance (a new round is prepared on it)
        guesser:       object implementing BaseGuesser
        length:        word length for the round
        guess_budget:  wrong guesses allowed
        difficulty:    adversary difficulty
        seed:          seeds both the guesser and the secret-word draw

    Returns:
        dict with keys:
            success (bool), guesses (int), wrong (int), secret (str),
            pattern (str), history (list[(letter, pattern, families)]),
            time_ms (float), difficulty (str), length (int), guess_budget (int)
    """
    difficulty = Difficulty.parse(difficulty)
    manager.prepare_round(length, guess_budget, difficulty)
    if seed is not None:
        manager.rng.seed(seed)
    guesser.reset(words=manager.dictionary.words_of_length(length), length=length, seed=seed)

    # (letter, pattern after the guess, number of families the guess produced)
    history: List[Tuple[str, str, int]] = []

    t0 = time.perf_counter()
    while not manager.is_over():
        state = {
            "turn": len(history) + 1,
            "pattern": manager.pattern(),
            "guessed": manager.guessed_letters(),
            "guesses_left": manager.guesses_left(),
            "length": length,
        }
        letter = guesser.next_letter(state)
        counts = manager.make_guess(letter)
        history.append((letter, manager.pattern(), len(counts)))
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "success": manager.is_solved(),
        "guesses": len(history),
        "wrong": manager.wrong_guesses(),
        "secret": manager.secret_word(),
        "pattern": manager.pattern(),
        "history": history,
        "time_ms": dt,
        "difficulty": difficulty.value,
        "length": length,
        "guess_budget": guess_budget,
    }


def run_batch(
        manager: HangmanManager,
        guesser,
        *,
        rounds: int,
        length: int = DEFAULT_WORD_LENGTH,
        guess_budget: int = DEFAULT_GUESS_BUDGET,
        difficulty: Difficulty = Difficulty.HARD,
        seed: int | None = None,
        on_round: Callable[[int, Dict], None] | None = None,
) -> List[Dict]:
    """
    Run `rounds` rounds back-to-back on the same manager.

    Each round's seed is derived from the base seed to make runs reproducible
    but not identical across rounds (seed + index).

    `on_round(idx, result)` is called after each round (1-based idx), e.g. to
    advance a progress bar.
    """
    out: List[Dict] = []
    for idx in range(1, rounds + 1):
        round_seed = None if seed is None else (seed + idx)
        r = run_round(
            manager, guesser, length=length, guess_budget=guess_budget,
            difficulty=difficulty, seed=round_seed,
        )
        out.append(r)
        if on_round is not None:
            on_round(idx, r)
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Headline numbers for a batch: win rate for the guesser and the
    distribution of guesses/wrong guesses per round.
    """
    if not results:
        return {"rounds": 0, "win_rate": 0.0, "mean_guesses": 0.0,
                "median_guesses": 0.0, "p90_guesses": 0.0, "mean_wrong": 0.0}

    guesses = np.array([r["guesses"] for r in results], dtype=float)
    wrong = np.array([r["wrong"] for r in results], dtype=float)
    wins = np.array([r["success"] for r in results], dtype=bool)
    return {
        "rounds": len(results),
        "win_rate": float(wins.mean()),
        "mean_guesses": float(guesses.mean()),
        "median_guesses": float(np.median(guesses)),
        "p90_guesses": float(np.percentile(guesses, 90)),
        "mean_wrong": float(wrong.mean()),
    }
