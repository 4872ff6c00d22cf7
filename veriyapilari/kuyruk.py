"""A first-in first-out queue of integers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

EMPTY_TEXT = "----KUYRUK BOS----"


class Queue:
    """FIFO queue that keeps track of its length."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def push(self, value: int) -> None:
        """Append value to the back."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the front value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("Kuyruk Bos")
        return self._items.popleft()

    def peek(self) -> int:
        """Return the front value without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("Kuyruk Bos")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __str__(self) -> str:
        if not self._items:
            return EMPTY_TEXT
        return "".join(f"{value:>5}" for value in self._items)