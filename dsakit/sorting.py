"""Elementary comparison sorts that return a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining element to the front each pass."""
    result = list(items)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result