"""
Random Letter guesser.

Picks any not-yet-guessed letter of the round alphabet uniformly at random
(seeded RNG). Baseline for the adversary: no reasoning at all.
"""

from __future__ import annotations

from .base import BaseGuesser, register


@register
class RandomLetterGuesser(BaseGuesser):
    id = "random_letter"
    name = "Random Letter"
    version = "1.0.0"

    def next_letter(self, state: dict) -> str:
        pool = self.unguessed(state)
        if not pool:
            raise ValueError("every letter of the round alphabet was already guessed")
        return pool[self.rng.randrange(len(pool))]
