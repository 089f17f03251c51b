"""Classic comparison sorts.

Each function accepts any iterable and returns a new sorted list,
leaving the input untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T", bound=Any)

__all__ = [
    "bubble_sort",
    "heap_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "selection_sort",
]


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent out-of-order pairs.

    Stops as soon as a pass ends with its last swap at the front
    (or with no swap at all), since everything after it is then in place.
    """
    items = list(values)
    end = len(items)
    while True:
        last_swap = 0
        for i in range(end - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                last_swap = i
        end -= 1
        if last_swap == 0:
            return items


def _sift_down(items: list[T], start: int, end: int) -> None:
    """Restore the max-heap property for the subtree rooted at ``start``."""
    root_value = items[start]
    child = 2 * start + 1
    while child <= end:
        if child < end and items[child] < items[child + 1]:
            child += 1
        if root_value < items[child]:
            items[start] = items[child]
            start = child
            child = 2 * start + 1
        else:
            break
    items[start] = root_value


def heap_sort(values: Iterable[T]) -> list[T]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    items = list(values)
    n = len(items)
    for start in range((n - 1) // 2, -1, -1):
        _sift_down(items, start, n - 1)
    for last in range(n - 1, 0, -1):
        items[0], items[last] = items[last], items[0]
        _sift_down(items, 0, last - 1)
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by inserting each element into the already-sorted prefix (stable)."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i
        while j > 0 and current < items[j - 1]:
            items[j] = items[j - 1]
            j -= 1
        items[j] = current
    return items


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Sort by recursively splitting in halves and merging the sorted halves (stable)."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(items: list[T], start: int, end: int) -> int:
    """Partition around ``items[start]``; return the pivot's final index."""
    pivot = items[start]
    left, right = start, end
    while left < right:
        while left <= end and items[left] <= pivot:
            left += 1
        while items[right] > pivot:
            right -= 1
        if left < right:
            items[left], items[right] = items[right], items[left]
    items[start] = items[right]
    items[right] = pivot
    return right


def quick_sort(values: Iterable[T]) -> list[T]:
    """Sort by partitioning around the first element of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if end > start:
            pivot = _partition(items, start, end)
            pending.append((start, pivot - 1))
            pending.append((pivot + 1, end))
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by moving the smallest remaining element to the front each pass."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
    return items