"""Recursive sorting, reversing and middle deletion on lists used as stacks.

The top of a stack is the end of the list.
"""

from __future__ import annotations

from typing import Any


def insert_sorted_list(arr: list[Any], ele: Any) -> None:
    """Insert ``ele`` into the ascending list ``arr`` so it stays ascending."""
    if not arr or ele > arr[-1]:
        arr.append(ele)
        return
    last = arr.pop()
    insert_sorted_list(arr, ele)
    arr.append(last)


def sort_list(arr: list[Any]) -> None:
    """Sort ``arr`` ascending in place."""
    if len(arr) <= 1:
        return
    ele = arr.pop()
    sort_list(arr)
    insert_sorted_list(arr, ele)


def _remove_from_top(stack: list[Any], depth: int) -> Any:
    if depth == 1:
        return stack.pop()
    top = stack.pop()
    removed = _remove_from_top(stack, depth - 1)
    stack.append(top)
    return removed


def delete_middle(stack: list[Any]) -> Any:
    """Remove and return the middle element of ``stack``.

    The middle is the ``len(stack) // 2 + 1``-th element counted from the top.
    """
    if not stack:
        raise IndexError("delete from an empty stack")
    return _remove_from_top(stack, len(stack) // 2 + 1)


def _insert_at_bottom(stack: list[Any], key: Any) -> None:
    if not stack:
        stack.append(key)
        return
    top = stack.pop()
    _insert_at_bottom(stack, key)
    stack.append(top)


def reverse_stack(stack: list[Any]) -> None:
    """Reverse ``stack`` in place."""
    if len(stack) <= 1:
        return
    top = stack.pop()
    reverse_stack(stack)
    _insert_at_bottom(stack, top)


def _insert_sorted_stack(stack: list[Any], key: Any) -> None:
    if not stack or stack[-1] < key:
        stack.append(key)
        return
    top = stack.pop()
    _insert_sorted_stack(stack, key)
    stack.append(top)


def sort_stack(stack: list[Any]) -> None:
    """Sort ``stack`` in place so that its largest element is on top."""
    if len(stack) <= 1:
        return
    top = stack.pop()
    sort_stack(stack)
    _insert_sorted_stack(stack, top)