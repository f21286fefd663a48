"""Tower of Hanoi moves."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence


def hanoi_moves(
    n: int, source: str = "A", helper: str = "B", destination: str = "C"
) -> Iterator[tuple[int, str, str]]:
    """Yield ``(disk, from_rod, to_rod)`` moves that carry ``n`` disks to ``destination``."""
    if n < 0:
        raise ValueError(f"number of disks must not be negative: {n}")
    if n == 0:
        return
    yield from hanoi_moves(n - 1, source, destination, helper)
    yield (n, source, destination)
    yield from hanoi_moves(n - 1, helper, source, destination)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the moves for a number of disks given on the command line or typed in."""
    parser = argparse.ArgumentParser(description="Print Tower of Hanoi moves.")
    parser.add_argument("disks", nargs="?", type=int, help="number of disks")
    args = parser.parse_args(argv)
    n = args.disks
    if n is None:
        n = int(input("Enter the number of disks: "))
    for disk, from_rod, to_rod in hanoi_moves(n):
        print(f"Move disk {disk} from {from_rod} to {to_rod}")
    return 0