# apps/cli/run.py
"""
CLI entry point for evil hangman simulations.

This script:
  1) Validates the dictionary (prints counts + SHA, checks the length is playable).
  2) Loads the words, builds the engine and the requested guesser.
  3) Runs a batch of rounds with a live progress indicator and writes:
       - CSV:  per-round results + letter/pattern history columns
       - JSON: manifest with config, dictionary hash, git commit, summary

Usage:
    python -m apps.cli.run --guesser letter_freq --difficulty medium --length 5 --rounds 200
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from tqdm import tqdm

from evilhangman.datasets import DEFAULT_DICTIONARY, load_words, pretty_summary, validate_wordlist
from evilhangman.engine import Difficulty, HangmanError, HangmanManager
from evilhangman.guessers import create_guesser, get_guesser_ids
from evilhangman.harness import DEFAULT_GUESS_BUDGET, DEFAULT_WORD_LENGTH, run_batch, summarize
from evilhangman.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def main():
    """
    Parse CLI args, validate the dictionary, run the batch with progress, and write outputs.
    """
    guesser_choices = ", ".join(get_guesser_ids())

    ap = argparse.ArgumentParser(description="evil hangman — run guesser simulations")
    ap.add_argument("--guesser", default="letter_freq",
                    help=f"guesser id (one of: {guesser_choices})")
    ap.add_argument("--difficulty", default="hard", choices=[d.value for d in Difficulty])
    ap.add_argument("--length", type=int, default=DEFAULT_WORD_LENGTH, help="word length")
    ap.add_argument("--guesses", type=int, default=DEFAULT_GUESS_BUDGET,
                    help="wrong guesses allowed per round")
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY),
                    help="path to the dictionary (one word per line)")
    ap.add_argument("--rounds", type=int, default=100, help="number of rounds to play")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["bar", "plain", "off"],
        default="bar",
        help="Show run progress (tqdm bar, plain text, or nothing)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Validate the dictionary and print a one-liner summary
    rep = validate_wordlist(args.dictionary, length=args.length)
    print(pretty_summary(rep))

    # 2) Build engine + guesser
    try:
        manager = HangmanManager(load_words(args.dictionary), seed=args.seed)
        guesser = create_guesser(args.guesser)
        difficulty = Difficulty.parse(args.difficulty)
    except (FileNotFoundError, HangmanError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    if manager.candidate_count_for_length(args.length) == 0:
        print(f"error: no words of length {args.length} in {args.dictionary}", file=sys.stderr)
        sys.exit(2)

    # 3) Run rounds with live progress
    total = args.rounds
    start = time.time()
    last_print = 0.0
    bar = tqdm(total=total, ncols=80, desc="Playing", unit="round") if args.progress == "bar" else None

    def on_round(idx: int, r: dict) -> None:
        nonlocal last_print
        r["guesser_id"] = guesser.id  # stamp id for downstream tools
        if bar is not None:
            bar.update(1)
        elif args.progress == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    results = run_batch(
        manager, guesser,
        rounds=total,
        length=args.length,
        guess_budget=args.guesses,
        difficulty=difficulty,
        seed=args.seed,
        on_round=on_round,
    )

    if bar is not None:
        bar.close()
    if args.progress == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    summary = summarize(results)

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "summary": summary,
        "guesser_id": guesser.id,
    }
    write_manifest(manifest, str(manifest_path))

    print(
        f"{guesser.id} vs {difficulty.value}: rounds={summary['rounds']} "
        f"win_rate={summary['win_rate']:.3f} mean_guesses={summary['mean_guesses']:.2f} "
        f"p90_guesses={summary['p90_guesses']:.1f} mean_wrong={summary['mean_wrong']:.2f}"
    )
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
