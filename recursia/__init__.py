"""Recursion and backtracking algorithms: partitions, permutations, sudoku, N-queens, mazes, stacks and Tower of Hanoi."""

__version__ = "0.1.0"