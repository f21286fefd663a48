"""Letter combinations, permutations, increasing numbers and subsets."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import combinations

_KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wyxz")


def letter_combinations(digits: str) -> list[str]:
    """Return the letter strings a phone keypad can spell for ``digits``."""
    if not digits:
        return []
    try:
        groups = [_KEYPAD[int(d)] for d in digits]
    except ValueError:
        raise ValueError(f"not a string of digits: {digits!r}") from None

    def spell(index: int, prefix: str) -> Iterator[str]:
        if index == len(groups):
            yield prefix
            return
        for letter in groups[index]:
            yield from spell(index + 1, prefix + letter)

    return list(spell(0, ""))


def permute(nums: Sequence[int]) -> list[list[int]]:
    """Return all orderings of ``nums`` by picking each remaining item in turn."""

    def build(remaining: list[int], chosen: list[int]) -> Iterator[list[int]]:
        if not remaining:
            yield chosen
            return
        for i, value in enumerate(remaining):
            yield from build(remaining[:i] + remaining[i + 1:], chosen + [value])

    return list(build(list(nums), []))


def permute_by_visited(nums: Sequence[int]) -> list[list[int]]:
    """Return all orderings of ``nums``, tracking used values in a set.

    Because values, not positions, are tracked, a sequence with repeated
    values yields no orderings.
    """
    visited: set[int] = set()
    current: list[int] = []
    result: list[list[int]] = []

    def extend() -> None:
        if len(current) == len(nums):
            result.append(current.copy())
            return
        for value in nums:
            if value not in visited:
                current.append(value)
                visited.add(value)
                extend()
                visited.discard(value)
                current.pop()

    extend()
    return result


def permute_by_swapping(nums: Sequence[int]) -> list[list[int]]:
    """Return all orderings of ``nums`` by swapping items into place."""
    items = list(nums)
    if not items:
        return []
    result: list[list[int]] = []

    def place(index: int) -> None:
        if index == len(items) - 1:
            result.append(items.copy())
            return
        for i in range(index, len(items)):
            items[i], items[index] = items[index], items[i]
            place(index + 1)
            items[i], items[index] = items[index], items[i]

    place(0)
    return result


def increasing_numbers(n: int) -> list[int]:
    """Return the ``n``-digit numbers whose digits strictly increase, ascending."""
    if n == 1:
        return list(range(10))

    def extend(remaining: int, number: int, last: int) -> Iterator[int]:
        if remaining == 0:
            yield number
            return
        for digit in range(last + 1, 10):
            yield from extend(remaining - 1, number * 10 + digit, digit)

    return list(extend(n, 0, 0))


def subsets_with_dup(nums: Sequence[int]) -> list[list[int]]:
    """Return the distinct subsets of ``nums``, each sorted, in lexicographic order."""
    found = {
        tuple(sorted(combo))
        for size in range(len(nums) + 1)
        for combo in combinations(nums, size)
    }
    return [list(subset) for subset in sorted(found)]