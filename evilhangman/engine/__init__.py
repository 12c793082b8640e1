from .errors import HangmanError, InvalidArgumentError, InvalidStateError
from .difficulty import Difficulty, relaxation_period, EASY_RELAXATION_PERIOD, MEDIUM_RELAXATION_PERIOD
from .families import BLANK, response_key, partition, family_counts
from .tiebreak import break_tie, hardest_key
from .selection import select_family, second_hardest_key
from .pattern import blank_pattern, overlay, is_revealed
from .constraints import is_consistent, filter_candidates
from .dictionary import Dictionary
from .round import RoundState
from .manager import HangmanManager

__all__ = [
    "HangmanError", "InvalidArgumentError", "InvalidStateError",
    "Difficulty", "relaxation_period", "EASY_RELAXATION_PERIOD", "MEDIUM_RELAXATION_PERIOD",
    "BLANK", "response_key", "partition", "family_counts",
    "break_tie", "hardest_key", "select_family", "second_hardest_key",
    "blank_pattern", "overlay", "is_revealed",
    "is_consistent", "filter_candidates",
    "Dictionary", "RoundState", "HangmanManager",
]
