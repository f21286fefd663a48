"""Largest number reachable with a limited number of digit swaps."""

from __future__ import annotations


def largest_after_swaps(s: str, k: int) -> str:
    """Return the largest string reachable from ``s`` with at most ``k`` swaps.

    At each position the search only swaps in the largest remaining
    character; if no larger character follows, the position is skipped
    without using a swap.
    """
    digits = list(s)
    best = s

    def search(swaps_left: int, index: int) -> None:
        nonlocal best
        if swaps_left == 0 or index == len(digits):
            best = max(best, "".join(digits))
            return
        largest = max(digits[index:])
        swapped = False
        for i in range(index + 1, len(digits)):
            if digits[index] < digits[i] == largest:
                swapped = True
                digits[index], digits[i] = digits[i], digits[index]
                search(swaps_left - 1, index + 1)
                digits[index], digits[i] = digits[i], digits[index]
        if not swapped:
            search(swaps_left, index + 1)

    search(k, 0)
    return best