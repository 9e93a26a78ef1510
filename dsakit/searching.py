"""Linear and binary search over sequences of comparable values."""

from __future__ import annotations

import argparse
import sys
from bisect import bisect_left
from collections.abc import Sequence
from typing import Any, TextIO


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return the index of ``target`` in the ascending ``items``, or None if absent."""
    index = bisect_left(items, target)
    if index < len(items) and items[index] == target:
        return index
    return None


def linear_search(items: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first item equal to ``target``, or None if absent."""
    return next((index for index, item in enumerate(items) if item == target), None)


def _read_ints(stream: TextIO) -> list[int]:
    return [int(token) for token in stream.read().split()]


def main(argv: Sequence[str] | None = None) -> int:
    """Search for a number among integers given as arguments or on standard input."""
    parser = argparse.ArgumentParser(
        prog="dsakit-search",
        description="Find the index of an element in a list of integers.",
    )
    parser.add_argument("target", type=int, help="element to be searched")
    parser.add_argument(
        "items",
        nargs="*",
        type=int,
        help="elements of the array; read from standard input when omitted",
    )
    parser.add_argument(
        "--linear",
        action="store_true",
        help="scan in order instead of bisecting (the items need not be sorted)",
    )
    args = parser.parse_args(argv)

    try:
        items = args.items or _read_ints(sys.stdin)
    except ValueError as exc:
        parser.error(f"invalid element: {exc}")

    search = linear_search if args.linear else binary_search
    index = search(items, args.target)
    if index is None:
        print("Element not found")
        return 1
    print(f"Element found at index: {index}")
    return 0


if __name__ == "__main__":
    sys.exit(main())