"""Linear, ordered and binary search over sequences."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any

__all__ = ["linear_search", "ordered_search", "binary_search", "main"]


def linear_search(values: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first element equal to ``target``, or None."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return None


def ordered_search(values: Sequence[Any], target: Any) -> int | None:
    """Scan an ascending sequence, stopping once an element exceeds ``target``."""
    for index, value in enumerate(values):
        if value == target:
            return index
        if target < value:
            return None
    return None


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in an ascending sequence, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        middle = (low + high) // 2
        if target < values[middle]:
            high = middle - 1
        elif target > values[middle]:
            low = middle + 1
        else:
            return middle
    return None


_METHODS = {
    "linear": linear_search,
    "ordered": ordered_search,
    "binary": binary_search,
}


def main(argv: list[str] | None = None) -> int:
    """Search for a number in a list and print where it was found."""
    parser = argparse.ArgumentParser(description="Search a list of integers.")
    parser.add_argument("target", nargs="?", type=int, default=4)
    parser.add_argument(
        "--method", choices=sorted(_METHODS), default="binary", help="search algorithm"
    )
    parser.add_argument(
        "--values", nargs="+", type=int, default=list(range(1, 11)), help="list to search"
    )
    args = parser.parse_args(argv)

    position = _METHODS[args.method](args.values, args.target)
    if position is None:
        print("pos = -1")
        return 1
    print(f"pos = {position}, elemen = {args.values[position]}")
    return 0