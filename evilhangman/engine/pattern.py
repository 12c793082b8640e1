"""Revealed-pattern helpers."""

from __future__ import annotations

from .families import BLANK


def blank_pattern(length: int) -> str:
    return BLANK * length


def overlay(pattern: str, key: str) -> str:
    """
    Fold a chosen family key into the pattern: revealed slots stay as they
    are, blank slots take the key's character (a letter or BLANK).
    """
    assert len(pattern) == len(key), "Pattern and key must be the same length"
    return "".join(old if old != BLANK else new for old, new in zip(pattern, key))


def is_revealed(pattern: str) -> bool:
    return BLANK not in pattern
