#!/usr/bin/env python
"""Load word lists for building ladders, and filter them to valid words.

Run as a script to filter a word list to just valid ladder words:

    python -m ladder.dictionary --length 5 < words.txt
"""

import argparse
import fileinput
from pathlib import Path
from typing import Iterable

DEFAULT_LENGTH = 4
DEFAULT_WORDLIST = Path(__file__).parent / "data" / "words4.txt"


def is_ladder_word(word: str, length: int | None = None):
    if not word:
        return False
    if length is not None and len(word) != length:
        return False
    for let in word:
        if let < "a" or let > "z":
            return False
    return True


def normalize_word(word: str) -> str:
    return word.strip().lower()


def read_words(lines: Iterable[str], length: int | None = None) -> list[str]:
    """Normalize and filter lines to ladder words, dropping duplicates.

    The first occurrence of each word is kept, so dictionary order is preserved.
    This order determines which of several equally short ladders is found.
    """
    seen = set[str]()
    out = []
    for line in lines:
        word = normalize_word(line)
        if not is_ladder_word(word, length) or word in seen:
            continue
        seen.add(word)
        out.append(word)
    return out


def load_words(path: str, length: int | None = None) -> list[str]:
    with open(path, encoding="utf-8") as f:
        return read_words(f, length)


def load_default_words(length: int | None = None) -> list[str]:
    """The bundled list of common four-letter words."""
    return load_words(str(DEFAULT_WORDLIST), length)


def main():
    parser = argparse.ArgumentParser(
        description="Filter a word list to valid ladder words, one per line."
    )
    parser.add_argument("--length", type=int, help="Only keep words of this length.")
    parser.add_argument("files", nargs="*", help="Word lists to read (default: stdin).")
    args = parser.parse_args()
    for word in read_words(fileinput.input(args.files), args.length):
        print(word)


if __name__ == "__main__":
    main()
