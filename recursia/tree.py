"""Binary tree nodes and recursive height."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Node | None = None
    right: Node | None = None


def build_sample_tree() -> Node:
    """Return the five-node sample tree: 1 with children 2 and 3, and 2 with 4 and 5."""
    return Node(1, Node(2, Node(4), Node(5)), Node(3))


def height(node: Node | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if node is None:
        return 0
    return 1 + max(height(node.left), height(node.right))


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sample tree's root and its height."""
    root = build_sample_tree()
    print(f"{root.data} ", end="")
    print(f"Height of the tree is: {height(root)}")
    return 0