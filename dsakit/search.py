"""Brute-force substring search."""

from __future__ import annotations


def find_all(text: str, pattern: str) -> list[int]:
    """Return every index at which ``pattern`` occurs in ``text``.

    Overlapping occurrences are all reported; an empty pattern matches at
    every position from 0 to ``len(text)``.
    """
    width = len(pattern)
    return [
        start
        for start in range(len(text) - width + 1)
        if text[start : start + width] == pattern
    ]


def search_pattern(text: str, pattern: str) -> str:
    """Return one ``index = N`` line for each occurrence of ``pattern``."""
    return "".join(f"index = {start}\n" for start in find_all(text, pattern))