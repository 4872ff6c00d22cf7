"""Binary search tree of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """A tree node."""

    value: int
    left: Node | None = None
    right: Node | None = None


def node_height(node: Node | None) -> int:
    """Height of the subtree at node: -1 for none, 0 for a leaf."""
    height = -1
    level = [node] if node is not None else []
    while level:
        height += 1
        level = [child for n in level for child in (n.left, n.right) if child is not None]
    return height


class BinarySearchTree:
    """Binary search tree that ignores duplicates and tracks the sum of its values."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        self.total = 0
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> bool:
        """Insert value; return False if it was already present."""
        if self.root is None:
            self.root = Node(value)
            self.total += value
            return True
        current = self.root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = Node(value)
                    break
                current = current.left
            elif value > current.value:
                if current.right is None:
                    current.right = Node(value)
                    break
                current = current.right
            else:
                return False
        self.total += value
        return True

    def height(self) -> int:
        return node_height(self.root)

    def postorder(self) -> Iterator[int]:
        """Yield values left subtree first, then right, then the node."""
        if self.root is None:
            return
        pending = [self.root]
        visited: list[Node] = []
        while pending:
            node = pending.pop()
            visited.append(node)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        for node in reversed(visited):
            yield node.value