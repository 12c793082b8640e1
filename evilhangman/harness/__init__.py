from .core import run_round, run_batch, summarize, DEFAULT_GUESS_BUDGET, DEFAULT_WORD_LENGTH
from .io import write_csv, write_manifest

__all__ = ["run_round", "run_batch", "summarize", "write_csv", "write_manifest",
           "DEFAULT_GUESS_BUDGET", "DEFAULT_WORD_LENGTH"]
