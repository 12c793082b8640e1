"""
I/O utilities for simulation runs.

Responsibilities:
- write_csv:     flatten per-round results into a tidy CSV (one row per round).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Patterns are prefixed with an apostrophe to keep Excel from interpreting
  strings like "-a--e" as formulas (which would display as #NAME?).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def _excel_safe_pattern(patt: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "-a--e" -> "'-a--e"
    """
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of round results to CSV.

    Schema (columns):
      guesser, difficulty, length, guess_budget, secret, success, guesses,
      wrong, time_ms, letter_1, patt_1, ..., letter_K, patt_K

    where K is the longest round in the batch (shorter rounds leave the
    trailing columns empty).

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    max_turns = max((len(r.get("history", [])) for r in results), default=0)
    fields = ["guesser", "difficulty", "length", "guess_budget", "secret",
              "success", "guesses", "wrong", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"letter_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "guesser": r.get("guesser_id", "?"),
                "difficulty": r["difficulty"],
                "length": r["length"],
                "guess_budget": r["guess_budget"],
                "secret": r["secret"],
                "success": r["success"],
                "guesses": r["guesses"],
                "wrong": r["wrong"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # Expand history into fixed columns (Excel-safe patterns)
            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    letter, patt, _ = hist[i - 1]
                    row[f"letter_{i}"] = letter
                    row[f"patt_{i}"] = _excel_safe_pattern(patt)
                else:
                    row[f"letter_{i}"] = ""
                    row[f"patt_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (guesser, difficulty, length, guesses, seed, rounds, outdir)
      - dictionary: output of datasets.validate_wordlist(...)
      - summary: output of harness.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
