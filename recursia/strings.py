"""Case permutations, space insertions and subsequences of strings."""

from __future__ import annotations

from collections.abc import Iterator


def letter_case_permutations(s: str) -> list[str]:
    """Return every string made by changing the case of letters in ``s``.

    The lowercase choice for each letter comes before the uppercase one.
    """
    lowered = s.lower()

    def build(index: int, prefix: str) -> Iterator[str]:
        if index == len(lowered):
            yield prefix
            return
        ch = lowered[index]
        yield from build(index + 1, prefix + ch)
        if ch.isalpha():
            yield from build(index + 1, prefix + ch.upper())

    return list(build(0, ""))


def space_permutations(s: str) -> list[str]:
    """Return every way to put single spaces between the characters of ``s``, sorted."""
    if not s:
        return []

    def build(index: int, prefix: str) -> Iterator[str]:
        if index == len(s):
            yield prefix
            return
        yield from build(index + 1, prefix + s[index])
        yield from build(index + 1, prefix + " " + s[index])

    return sorted(build(1, s[0]))


def subsequences(s: str) -> list[str]:
    """Return all subsequences of ``s``, leaving each character out before taking it."""

    def build(index: int, prefix: str) -> Iterator[str]:
        if index == len(s):
            yield prefix
            return
        yield from build(index + 1, prefix)
        yield from build(index + 1, prefix + s[index])

    return list(build(0, ""))