"""Least-significant-digit radix sort for non-negative integers."""

from __future__ import annotations

from collections.abc import Iterable

from veriyapilari.kuyruk import Queue


def digit_count(number: int) -> int:
    """Number of decimal digits; zero has none."""
    return len(str(abs(number))) if number else 0


def radix_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, using ten digit queues."""
    numbers = list(values)
    if not numbers:
        return []
    if any(n < 0 for n in numbers):
        raise ValueError("radix sort needs non-negative numbers")

    passes = max(1, max(digit_count(n) for n in numbers))
    divisor = 1
    for _ in range(passes):
        queues = [Queue() for _ in range(10)]
        for number in numbers:
            queues[(number // divisor) % 10].push(number)
        numbers = [number for queue in queues for number in queue]
        divisor *= 10
    return numbers