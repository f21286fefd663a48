"""Josephus winner, grammar symbols, factorials, parentheses and binary strings."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from math import prod


def find_the_winner(n: int, k: int) -> int:
    """Return the survivor when ``n`` friends in a circle drop out every ``k``-th.

    Friends are numbered from 1 and counting starts at friend 1.
    """
    if n < 1:
        raise ValueError(f"need at least one friend, got {n}")
    if k < 1:
        raise ValueError(f"step must be positive, got {k}")
    circle = deque(range(1, n + 1))
    while len(circle) > 1:
        circle.rotate(-(k - 1))
        circle.popleft()
    return circle[0]


def kth_grammar(n: int, k: int) -> int:
    """Return the ``k``-th symbol (1-based) in row ``n`` of the 0 -> 01, 1 -> 10 grammar."""
    if n < 1:
        raise ValueError(f"row must be positive, got {n}")
    if not 1 <= k <= 2 ** (n - 1):
        raise ValueError(f"position {k} is outside row {n}")
    if n == 1:
        return 0
    mid = 2 ** (n - 2)
    if k <= mid:
        return kth_grammar(n - 1, k)
    return 1 - kth_grammar(n - 1, k - mid)


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer ``n``."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers: {n}")
    return prod(range(2, n + 1))


def generate_parenthesis(n: int) -> list[str]:
    """Return every balanced string of ``n`` pairs of parentheses, in lexicographic order."""
    if n < 0:
        raise ValueError(f"number of pairs must not be negative: {n}")

    def build(open_left: int, close_left: int, prefix: str) -> Iterator[str]:
        if open_left == 0:
            yield prefix + ")" * close_left
            return
        yield from build(open_left - 1, close_left, prefix + "(")
        if open_left < close_left:
            yield from build(open_left, close_left - 1, prefix + ")")

    return list(build(n, n, ""))


def n_bit_binary(n: int) -> list[str]:
    """Return ``n``-bit strings in which every prefix has at least as many 1s as 0s.

    Strings are listed in descending order.
    """
    if n < 0:
        raise ValueError(f"number of bits must not be negative: {n}")

    def build(remaining: int, prefix: str, ones: int, zeros: int) -> Iterator[str]:
        if remaining == 0:
            yield prefix
            return
        yield from build(remaining - 1, prefix + "1", ones + 1, zeros)
        if ones > zeros:
            yield from build(remaining - 1, prefix + "0", ones, zeros + 1)

    return list(build(n, "", 0, 0))