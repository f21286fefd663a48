"""N-queens placement by backtracking column by column."""

from __future__ import annotations


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every arrangement of ``n`` non-attacking queens.

    Each board is a list of ``n`` strings using ``Q`` and ``.``. Queens are
    placed column by column, trying rows from top to bottom.
    """
    board = [["."] * n for _ in range(n)]
    rows: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()
    result: list[list[str]] = []

    def place(col: int) -> None:
        if col == n:
            result.append(["".join(line) for line in board])
            return
        for row in range(n):
            if row in rows or row - col in diagonals or row + col in anti_diagonals:
                continue
            board[row][col] = "Q"
            rows.add(row)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            place(col + 1)
            rows.discard(row)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)
            board[row][col] = "."

    place(0)
    return result