"""
Exceptions raised by the engine.

Every error is a caller precondition violation; nothing here is transient
or worth retrying.
"""


class HangmanError(Exception):
    """Base class for engine errors."""


class InvalidArgumentError(HangmanError, ValueError):
    """Bad input: empty dictionary, unknown word length, budget < 1, ..."""


class InvalidStateError(HangmanError, RuntimeError):
    """Operation not allowed in the current round state."""
