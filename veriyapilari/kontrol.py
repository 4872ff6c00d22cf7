"""Mutation step: halve the even values of a tree and rebuild it."""

from __future__ import annotations

from collections.abc import Iterable

from veriyapilari.agac import BinarySearchTree


def halve_even(values: Iterable[int]) -> list[int]:
    """Return the values with every even one divided by two."""
    return [value // 2 if value % 2 == 0 else value for value in values]


def mutate_tree(tree: BinarySearchTree) -> BinarySearchTree:
    """New tree built from the tree's postorder values with evens halved."""
    return BinarySearchTree(halve_even(tree.postorder()))