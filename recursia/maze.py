"""All paths for a rat through a square maze of open and blocked cells."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def rat_in_maze(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every path from the top-left to the bottom-right cell.

    Cells holding 0 are blocked. Paths are strings of ``D``, ``L``, ``R`` and
    ``U`` that never revisit a cell, listed in that move order.
    """
    n = len(maze)
    if n == 0 or maze[0][0] == 0 or maze[n - 1][n - 1] == 0:
        return []
    visited: set[tuple[int, int]] = set()

    def walk(x: int, y: int, path: str) -> Iterator[str]:
        if not (0 <= x < n and 0 <= y < n) or (x, y) in visited or maze[x][y] == 0:
            return
        if x == n - 1 and y == n - 1:
            yield path
            return
        visited.add((x, y))
        for step, dx, dy in _MOVES:
            yield from walk(x + dx, y + dy, path + step)
        visited.discard((x, y))

    return list(walk(0, 0, ""))