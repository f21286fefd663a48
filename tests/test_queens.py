import pytest

from recursia.queens import solve_n_queens


def queens_of(board):
    return [(r, c) for r, line in enumerate(board) for c, ch in enumerate(line) if ch == "Q"]


def assert_valid(board, n):
    assert len(board) == n
    assert all(len(line) == n and set(line) <= {"Q", "."} for line in board)
    queens = queens_of(board)
    assert len(queens) == n
    assert len({r for r, _ in queens}) == n
    assert len({c for _, c in queens}) == n
    assert len({r - c for r, c in queens}) == n
    assert len({r + c for r, c in queens}) == n


@pytest.mark.parametrize("n", [1, 4, 5, 6, 8])
def test_all_boards_are_valid_and_distinct(n):
    boards = solve_n_queens(n)
    assert boards
    for board in boards:
        assert_valid(board, n)
    assert len({tuple(b) for b in boards}) == len(boards)


def test_single_queen():
    assert solve_n_queens(1) == [["Q"]]


@pytest.mark.parametrize("n", [2, 3])
def test_no_solutions_for_small_boards(n):
    assert solve_n_queens(n) == []


def test_eight_queens_count():
    assert len(solve_n_queens(8)) == 92


def test_solutions_closed_under_mirroring():
    boards = {tuple(b) for b in solve_n_queens(6)}
    for board in boards:
        assert tuple(line[::-1] for line in board) in boards
        assert tuple(reversed(board)) in boards