"""Balance check for the root of a binary tree."""

from __future__ import annotations

from veriyapilari.agac import Node, node_height


def is_balanced(node: Node | None) -> bool:
    """True when the heights of the node's two subtrees differ by at most one."""
    if node is None:
        raise ValueError("no node given")
    return abs(node_height(node.left) - node_height(node.right)) <= 1