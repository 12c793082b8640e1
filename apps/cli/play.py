# apps/cli/play.py
"""
Play one round of evil hangman in the terminal.

Usage:
    python -m apps.cli.play --length 5 --guesses 8 --difficulty hard
    python -m apps.cli.play --debug     # also show the family table each guess
"""

from __future__ import annotations

import argparse
import logging
import sys

from evilhangman.datasets import DEFAULT_DICTIONARY, load_words
from evilhangman.engine import Difficulty, HangmanError, HangmanManager
from evilhangman.harness import DEFAULT_GUESS_BUDGET, DEFAULT_WORD_LENGTH


def _read_letter(manager: HangmanManager) -> str:
    """Prompt until the user types one letter they have not tried yet."""
    while True:
        raw = input("Your guess? ").strip().lower()
        if len(raw) != 1 or not raw.isalpha():
            print("Please enter a single letter.")
        elif manager.already_guessed(raw):
            print(f"You already guessed {raw!r}.")
        else:
            return raw


def play(manager: HangmanManager, *, length: int, guesses: int, difficulty: Difficulty,
         debug: bool = False) -> bool:
    manager.prepare_round(length, guesses, difficulty)

    while not manager.is_over():
        print()
        print(f"Guesses left: {manager.guesses_left()}")
        print(f"Guessed so far: {manager.guessed_letters()}")
        print(f"Current word: {manager.pattern()}")

        letter = _read_letter(manager)
        before = manager.guesses_left()
        families = manager.make_guess(letter)

        if debug:
            print(f"families: {families}")
            print(f"words left: {manager.candidate_count()}")
        if manager.guesses_left() < before:
            print(f"Sorry, there are no {letter}'s.")
        else:
            print(f"Yes, there is at least one {letter}.")

    answer = manager.secret_word()
    print()
    if manager.is_solved():
        print(f"You beat me! The word was {answer}.")
        return True
    print(f"Sorry, you lose. The word was {answer}.")
    return False


def main():
    ap = argparse.ArgumentParser(description="evil hangman — play in the terminal")
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY),
                    help="path to the dictionary (one word per line)")
    ap.add_argument("--length", type=int, default=DEFAULT_WORD_LENGTH, help="word length")
    ap.add_argument("--guesses", type=int, default=DEFAULT_GUESS_BUDGET,
                    help="wrong guesses allowed")
    ap.add_argument("--difficulty", default="hard", choices=[d.value for d in Difficulty])
    ap.add_argument("--seed", type=int, help="seed for the final secret-word draw")
    ap.add_argument("--debug", action="store_true", help="print the family table after each guess")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        manager = HangmanManager(load_words(args.dictionary), seed=args.seed)
        play(manager, length=args.length, guesses=args.guesses,
             difficulty=Difficulty.parse(args.difficulty), debug=args.debug)
    except (FileNotFoundError, HangmanError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)
    except (KeyboardInterrupt, EOFError):
        print()
        sys.exit(130)


if __name__ == "__main__":
    main()
