# recursia

A collection of classic recursion and backtracking algorithms written as plain
Python functions. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `recursia.partitioning` | `is_palindrome`, `palindrome_partitions`, `word_break` |
| `recursia.combinatorics` | `letter_combinations`, `permute`, `permute_by_visited`, `permute_by_swapping`, `increasing_numbers`, `subsets_with_dup` |
| `recursia.sudoku` | `is_valid`, `solve_sudoku`, `EMPTY` |
| `recursia.queens` | `solve_n_queens` |
| `recursia.swaps` | `largest_after_swaps` |
| `recursia.maze` | `rat_in_maze` |
| `recursia.sequences` | `find_the_winner`, `kth_grammar`, `factorial`, `generate_parenthesis`, `n_bit_binary` |
| `recursia.strings` | `letter_case_permutations`, `space_permutations`, `subsequences` |
| `recursia.tree` | `Node`, `build_sample_tree`, `height`, `main` |
| `recursia.stacks` | `insert_sorted_list`, `sort_list`, `delete_middle`, `reverse_stack`, `sort_stack` |
| `recursia.hanoi` | `hanoi_moves`, `main` |

Some notes on behaviour:

- `solve_sudoku(board)` fills a 9x9 list of single-character strings in place,
  with `"."` marking empty cells, and returns `True` when the board was completed.
- `solve_n_queens(n)` returns each board as a list of strings of `Q` and `.`.
- `rat_in_maze(maze)` returns paths as strings of `D`, `L`, `R` and `U`; cells
  holding 0 are blocked.
- The functions in `recursia.stacks` work in place on lists whose end is the top
  of the stack; `delete_middle` also returns the element it removed.
- `hanoi_moves(n, source="A", helper="B", destination="C")` is a generator of
  `(disk, from_rod, to_rod)` tuples.
- `find_the_winner`, `kth_grammar`, `factorial`, `generate_parenthesis`,
  `n_bit_binary` and `hanoi_moves` raise `ValueError` for out-of-range arguments;
  `delete_middle` raises `IndexError` on an empty stack.

## Examples

```python
from recursia.partitioning import palindrome_partitions
from recursia.queens import solve_n_queens
from recursia.sequences import generate_parenthesis
from recursia.hanoi import hanoi_moves

palindrome_partitions("aab")   # [['a', 'a', 'b'], ['aa', 'b']]
len(solve_n_queens(8))         # 92
generate_parenthesis(2)        # ['(())', '()()']
list(hanoi_moves(2))           # [(1, 'A', 'B'), (2, 'A', 'C'), (1, 'B', 'C')]
```

## Command-line tools

Print the root and the height of a small five-node sample binary tree:

```
recursia-tree
```

Print the moves that solve the Tower of Hanoi from rod A to rod C. Give the
number of disks as an argument, or leave it out to be asked for it:

```
recursia-hanoi 3
recursia-hanoi
```