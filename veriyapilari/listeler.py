"""Split numbers into tens and units lists and sum the column averages."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

OUT_OF_RANGE_MESSAGE = "Girdiniz konum sinir disidir!!"


def _parse_ints(line: str) -> list[int]:
    """Read whitespace separated integers, stopping at the first bad token."""
    numbers = []
    for token in line.split():
        try:
            numbers.append(int(token))
        except ValueError:
            break
    return numbers


def _split_number(number: int) -> tuple[int, int]:
    """Split into quotient and remainder by ten, truncating toward zero."""
    quotient = abs(number) // 10
    remainder = abs(number) % 10
    if number < 0:
        return -quotient, -remainder
    return quotient, remainder


def split_digits(lines: Iterable[str]) -> tuple[list[list[int]], list[list[int]]]:
    """Return per-line lists of the numbers divided by ten and of their last digits."""
    upper: list[list[int]] = []
    lower: list[list[int]] = []
    for line in lines:
        pairs = [_split_number(n) for n in _parse_ints(line)]
        upper.append([tens for tens, _ in pairs])
        lower.append([units for _, units in pairs])
    return upper, lower


def swap_positions(
    upper: Sequence[list[int]],
    lower: Sequence[list[int]],
    position_a: int,
    position_b: int,
) -> tuple[list[list[int]], list[list[int]]]:
    """Exchange upper[position_a] with lower[position_b] and return new outer lists."""
    if not (0 <= position_a < len(upper) and 0 <= position_b < len(lower)):
        raise IndexError(OUT_OF_RANGE_MESSAGE)
    new_upper = list(upper)
    new_lower = list(lower)
    new_upper[position_a], new_lower[position_b] = lower[position_b], upper[position_a]
    return new_upper, new_lower


def column_average_sums(
    upper: Sequence[Sequence[int]], lower: Sequence[Sequence[int]]
) -> tuple[float, float]:
    """Sum the column averages of both list sets, truncating to one decimal each step.

    Columns are walked while any upper list still has values; columns of the
    lower lists past that point are not counted.
    """
    upper_total = 0.0
    lower_total = 0.0
    column = 0
    while True:
        upper_column = [row[column] for row in upper if column < len(row)]
        lower_column = [row[column] for row in lower if column < len(row)]
        if upper_column:
            average = sum(float(v) for v in upper_column) / len(upper_column)
            upper_total = math.floor((upper_total + average) * 10) / 10
        if lower_column:
            average = sum(float(v) for v in lower_column) / len(lower_column)
            lower_total = math.floor((lower_total + average) * 10) / 10
        column += 1
        if not any(len(row) > column for row in upper):
            break
    return upper_total, lower_total


def read_lines(path: str | Path) -> list[str]:
    """Return the lines of a text file."""
    return Path(path).read_text().splitlines()


def _ask_position(prompt: str) -> int:
    answer = input(prompt)
    print()
    tokens = answer.split()
    try:
        return int(tokens[0]) if tokens else 0
    except ValueError:
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Swap two rows and print the summed column averages."
    )
    parser.add_argument("path", nargs="?", default="benioku.txt")
    args = parser.parse_args(argv)
    try:
        lines = read_lines(args.path)
    except OSError as error:
        print(f"{args.path}: {error.strerror}", file=sys.stderr)
        return 1

    upper, lower = split_digits(lines)
    position_a = _ask_position("konumA giriniz:")
    position_b = _ask_position("konumB giriniz:")
    try:
        upper, lower = swap_positions(upper, lower, position_a, position_b)
    except IndexError:
        print(OUT_OF_RANGE_MESSAGE, end="")

    upper_total, lower_total = column_average_sums(upper, lower)
    print(f" Ust: {upper_total:g}")
    print(f" Alt:{lower_total:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())