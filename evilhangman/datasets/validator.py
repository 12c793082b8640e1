"""
Dictionary validator for evil hangman word lists.

What this module does:
- Validate a one-word-per-line dictionary file.
- Enforce formatting rules (lowercase a–z only, one word per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Build a histogram of word lengths so callers can see which round lengths
  are playable, and optionally require a specific length.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from evilhangman.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("evilhangman/datasets/data/dictionary.txt", length=5)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for one dictionary file."""
    file: FileReport
    length: int | None                  # requested round length (None = any)
    length_count: int                   # unique valid words of that length (0 if None)
    lengths: Dict[int, int] = field(default_factory=dict)  # word length -> unique words
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _is_valid_word(w: str) -> bool:
    return w.isascii() and w.isalpha() and w.islower()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and _is_valid_word(w):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str, length: int | None = None) -> Dict:
    """
    Validate a dictionary file, optionally for a given round length.

    Parameters
    ----------
    path : str
        Path to the dictionary (one word per line).
    length : int, optional
        Round length that must be playable (at least one word of it).

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema).
        `passed` is strict: non-empty, no invalid lines, no duplicates and,
        when `length` is given, at least one word of that length.
        Length histogram keys are ints; json.dump turns them into strings.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"dictionary file not found: {path}")
        rep = ValidationReport(
            file=FileReport(path, False, 0, "", 0, 0),
            length=length,
            length_count=0,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    words, invalid = _load_and_check(p)
    unique = set(words)

    file_report = FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
    )

    lengths = dict(sorted(Counter(len(w) for w in unique).items()))
    length_count = lengths.get(length, 0) if length is not None else 0

    if file_report.count == 0:
        issues.append("dictionary contains 0 valid words")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid line(s)")
    if file_report.count != file_report.unique_count:
        issues.append("dictionary contains duplicate lines")
    if length is not None and length_count == 0:
        issues.append(f"no words of length {length}")

    passed = (
            file_report.count > 0
            and invalid == 0
            and file_report.count == file_report.unique_count
            and (length is None or length_count > 0)
    )

    rep = ValidationReport(
        file=file_report,
        length=length,
        length_count=length_count,
        lengths=lengths,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        dictionary=240 (uniq=240, sha=abc123...) | lengths 3..9 | length 5: 52 words | OK
    """
    f = report["file"]
    status = "OK" if report["passed"] else "FAIL"
    sha = (f.get("sha256") or "")[:12]
    lengths = report.get("lengths") or {}
    span = f"{min(lengths)}..{max(lengths)}" if lengths else "none"
    parts = [
        f"dictionary={f['count']} (uniq={f['unique_count']}, sha={sha})",
        f"lengths {span}",
    ]
    if report.get("length") is not None:
        parts.append(f"length {report['length']}: {report['length_count']} words")
    parts.append(status)
    return " | ".join(parts)
