"""Split number lines into stacks, build trees and print the tallest one."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from pathlib import Path

from veriyapilari.agac import BinarySearchTree
from veriyapilari.yigin import Stack

LINE_DELAY_SECONDS = 0.01


def _parse_ints(line: str) -> list[int]:
    numbers = []
    for token in line.split():
        try:
            numbers.append(int(token))
        except ValueError:
            break
    return numbers


def _starts_new_stack(previous: int, current: int) -> bool:
    return current % 2 == 0 and current > previous


def count_stacks(values: Sequence[int]) -> int:
    """Number of stacks: one plus each even value larger than the one before it."""
    return 1 + sum(
        _starts_new_stack(previous, current) for previous, current in zip(values, values[1:])
    )


def split_into_stacks(values: Sequence[int]) -> list[Stack]:
    """Push values in order, starting a new stack before each even rise."""
    stacks = [Stack() for _ in range(count_stacks(values))]
    current = 0
    for index, value in enumerate(values):
        stacks[current].push(value)
        following = index + 1
        if following < len(values) and _starts_new_stack(value, values[following]):
            current += 1
    return stacks


def build_trees(stacks: Sequence[Stack]) -> list[BinarySearchTree]:
    """Empty each stack into its own tree."""
    trees = []
    for stack in stacks:
        tree = BinarySearchTree()
        while not stack.is_empty():
            tree.insert(stack.pop())
        trees.append(tree)
    return trees


def tallest_tree(trees: Sequence[BinarySearchTree]) -> BinarySearchTree:
    """Tallest tree; ties go to the larger sum, then to the earlier tree."""
    if not trees:
        raise ValueError("no trees given")
    best = trees[0]
    best_height = best.height()
    for tree in trees[1:]:
        height = tree.height()
        if height > best_height or (height == best_height and tree.total > best.total):
            best, best_height = tree, height
    return best


def process_line(line: str) -> str:
    """Postorder of the tallest tree built from a line, each value as a character."""
    values = _parse_ints(line)
    tree = tallest_tree(build_trees(split_into_stacks(values)))
    return "".join(f"{chr(value & 0xFF)}  " for value in tree.postorder())


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print the tallest tree of each line as characters."
    )
    parser.add_argument("path", nargs="?", default="veriler.txt")
    args = parser.parse_args(argv)
    try:
        lines = Path(args.path).read_text().splitlines()
    except OSError as error:
        print(f"{args.path}: {error.strerror}", file=sys.stderr)
        return 1
    for line in lines:
        print(process_line(line))
        time.sleep(LINE_DELAY_SECONDS)
    return 0


if __name__ == "__main__":
    sys.exit(main())