"""Read number lines into cells, tissues, organs and systems, and draw the organism."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from veriyapilari.agac import BinarySearchTree
from veriyapilari.doku import Cell, Tissue
from veriyapilari.organ import is_balanced
from veriyapilari.organizma import Organism

LINES_PER_ORGAN = 20
LINES_PER_SYSTEM = 2000

_ANSI_CLEAR = "\033[2J\033[H"


def _parse_ints(line: str) -> list[int]:
    numbers = []
    for token in line.split():
        try:
            numbers.append(int(token))
        except ValueError:
            break
    return numbers


def simulate(lines: Iterable[str]) -> Organism:
    """Build the organism from lines of numbers.

    Each line becomes a sorted cell whose middle value joins the tissue; every
    twenty lines the tissue becomes a tree whose balance is one organ, and
    every two thousand lines a new system starts.
    """
    organism = Organism()
    tissue = Tissue()
    for number, line in enumerate(lines, start=1):
        cell = Cell(_parse_ints(line))
        cell.sort()
        tissue.add_cell(cell)

        if number % LINES_PER_ORGAN == 0:
            tree = BinarySearchTree(tissue)
            tissue.clear()
            balanced = is_balanced(tree.root)
            system = organism.current
            system.add_organ(balanced)
            system.set_mutation(balanced and tree.root.value % 50 != 0)

        if number % LINES_PER_SYSTEM == 0:
            organism.new_system()
    return organism


def _pause() -> None:
    try:
        input("Press any key to continue . . . ")
    except EOFError:
        pass


def _clear_screen() -> None:
    """Clear the terminal with the system's clear command, or escape codes."""
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        result = subprocess.run(command, check=False)
    except OSError:
        result = None
    if result is None or result.returncode != 0:
        sys.stdout.write(_ANSI_CLEAR)
    sys.stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Draw the organism built from a file of number lines."
    )
    parser.add_argument("path", nargs="?", default="Veri.txt")
    args = parser.parse_args(argv)
    try:
        lines = Path(args.path).read_text().splitlines()
    except OSError as error:
        print(f"{args.path}: {error.strerror}", file=sys.stderr)
        return 1
    try:
        organism = simulate(lines)
    except ValueError as error:
        print(f"{args.path}: {error}", file=sys.stderr)
        return 1

    _clear_screen()
    print(organism.render(), end="")
    _pause()
    _clear_screen()
    print(organism.render_mutation(), end="")
    _pause()
    return 0


if __name__ == "__main__":
    sys.exit(main())