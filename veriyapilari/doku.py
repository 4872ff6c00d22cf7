"""Cells holding numbers, and tissues built from the middle value of each cell."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from veriyapilari.radix import radix_sort


class Cell:
    """An ordered collection of integers that can radix-sort itself."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._values: list[int] = list(values)

    def add(self, value: int) -> None:
        """Append value at the end."""
        self._values.append(value)

    def sort(self) -> None:
        """Reorder the values ascending."""
        self._values = radix_sort(self._values)

    def clear(self) -> None:
        self._values = []

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __str__(self) -> str:
        return "".join(f"{value} " for value in self._values)


class Tissue:
    """The middle values of the cells added to it, in the order added."""

    def __init__(self) -> None:
        self._values: list[int] = []

    def add_cell(self, cell: Iterable[int]) -> int:
        """Append and return the middle value of cell (the lower one for even sizes)."""
        values = list(cell)
        if not values:
            raise ValueError("cell has no values")
        middle = values[(len(values) - 1) // 2]
        self._values.append(middle)
        return middle

    def clear(self) -> None:
        self._values = []

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __str__(self) -> str:
        return "".join(f"{value} " for value in self._values)