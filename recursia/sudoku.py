"""Sudoku solving by backtracking over a 9x9 grid of characters."""

from __future__ import annotations

EMPTY = "."
_DIGITS = range(1, 10)


def is_valid(board: list[list[str]], val: int, row: int, col: int) -> bool:
    """Return True if digit ``val`` may be placed at (``row``, ``col``)."""
    ch = str(val)
    if ch in board[row]:
        return False
    if any(board[r][col] == ch for r in range(9)):
        return False
    top, left = 3 * (row // 3), 3 * (col // 3)
    return all(
        board[top + r][left + c] != ch for r in range(3) for c in range(3)
    )


def solve_sudoku(board: list[list[str]]) -> bool:
    """Fill the empty cells of ``board`` in place.

    Returns True when the board was completed; otherwise the board is left
    as it was given and False is returned.
    """
    for row in range(9):
        for col in range(9):
            if board[row][col] != EMPTY:
                continue
            for val in _DIGITS:
                if is_valid(board, val, row, col):
                    board[row][col] = str(val)
                    if solve_sudoku(board):
                        return True
                    board[row][col] = EMPTY
            return False
    return True