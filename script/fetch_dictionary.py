"""
Download a word list and write a clean hangman dictionary.

What it does:
- Downloads the page or plain-text file at --url.
- If the response is HTML, parses its visible text with BeautifulSoup.
- Extracts lowercase a-z words (optionally within a length range).
- De-duplicates while preserving source order, and writes one word per line.

Usage:
    python -m script.fetch_dictionary --out evilhangman/datasets/data/dictionary.txt
    # or alphabetically sorted, 4-8 letters only:
    python -m script.fetch_dictionary --sort --min-length 4 --max-length 8 --out words.txt
"""

from __future__ import annotations

import re
import argparse

import requests
from bs4 import BeautifulSoup

from evilhangman.datasets import write_lines

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"
WORD_RE = re.compile(r"\b[A-Za-z]+\b")


def extract_words(text: str, min_length: int = 1, max_length: int | None = None) -> list[str]:
    words = (m.group(0).lower() for m in WORD_RE.finditer(text))
    words = (w for w in words if len(w) >= min_length and (max_length is None or len(w) <= max_length))
    # dict.fromkeys keeps first-seen order while dropping repeats
    return list(dict.fromkeys(words))


def fetch_words(url: str = URL, min_length: int = 1, max_length: int | None = None) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    text = r.text
    if "html" in r.headers.get("Content-Type", ""):
        soup = BeautifulSoup(text, "html.parser")
        text = soup.get_text("\n", strip=True)
    return extract_words(text, min_length, max_length)


def main():
    ap = argparse.ArgumentParser(description="Download and clean a hangman dictionary")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="evilhangman/datasets/data/dictionary.txt")
    ap.add_argument("--min-length", type=int, default=1)
    ap.add_argument("--max-length", type=int)
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = fetch_words(args.url, args.min_length, args.max_length)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")

if __name__ == "__main__":
    main()
