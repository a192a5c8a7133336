"""Boyer-Moore-Horspool substring search."""

from __future__ import annotations

import argparse
import sys


def shift_table(pattern: str) -> dict[str, int]:
    """Return the bad-character shifts for every character but the last of ``pattern``.

    Characters not in the table shift by the full pattern length.
    """
    last = len(pattern) - 1
    return {char: last - i for i, char in enumerate(pattern[:-1])}


def bmh_search(text: str, pattern: str) -> int:
    """Return the index of the first occurrence of ``pattern`` in ``text``, or -1."""
    m = len(pattern)
    if m == 0:
        return 0
    table = shift_table(pattern)
    end = m - 1
    while end < len(text):
        start = end - m + 1
        if text[start : end + 1] == pattern:
            return start
        end += table.get(text[end], m)
    return -1


def main(argv: list[str] | None = None) -> int:
    """Demonstrate string operations and the search, then report a word's length."""
    parser = argparse.ArgumentParser(
        description="Demonstrate string concatenation, comparison and searching."
    )
    parser.parse_args(argv)

    b = "Foot"
    c = "ball"
    a = b + c
    print(a)
    a += c
    print(a)

    b = "ball"
    if c == b:
        print("c and b are equal")
    b = a
    if c != b:
        print("c and b are not equal")

    text = "Vo dvore trava na trave drova"
    pattern = "drova"
    print(f"First occurrence = {bmh_search(text, pattern)}")
    print(f"Text = {text}")
    print(f"Pattern = {pattern}")

    tokens = sys.stdin.read().split()
    if not tokens:
        print("\nerror: unexpected end of input", file=sys.stderr)
        return 1
    print(f"Length = {len(tokens[0])}")
    return 0