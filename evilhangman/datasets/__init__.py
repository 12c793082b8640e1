from pathlib import Path

from .validator import validate_wordlist, pretty_summary
from .io import read_lines, write_lines, load_words

# Small bundled word list so the CLIs run out of the box.
DEFAULT_DICTIONARY = Path(__file__).resolve().parent / "data" / "dictionary.txt"

__all__ = ["validate_wordlist", "pretty_summary", "read_lines", "write_lines", "load_words",
           "DEFAULT_DICTIONARY"]
