"""Splitting strings into palindromes or dictionary words."""

from __future__ import annotations

from functools import lru_cache
from collections.abc import Iterable, Iterator


def is_palindrome(s: str) -> bool:
    """Return True if ``s`` reads the same forwards and backwards."""
    return s == s[::-1]


def palindrome_partitions(s: str) -> list[list[str]]:
    """Return every way to cut ``s`` into pieces that are all palindromes.

    Partitions are produced with shorter leading pieces first.
    """

    def split(start: int) -> Iterator[list[str]]:
        if start == len(s):
            yield []
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if is_palindrome(piece):
                for rest in split(end):
                    yield [piece, *rest]

    return list(split(0))


def word_break(s: str, words: Iterable[str]) -> bool:
    """Return True if ``s`` is a concatenation of words from ``words``.

    Words may be reused any number of times; the empty string always breaks.
    """
    vocabulary = frozenset(words)

    @lru_cache(maxsize=None)
    def breaks_from(start: int) -> bool:
        if start == len(s):
            return True
        return any(
            s[start:end] in vocabulary and breaks_from(end)
            for end in range(start + 1, len(s) + 1)
        )

    return breaks_from(0)