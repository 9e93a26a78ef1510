"""Integer matrix multiplication and plain-text display."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from itertools import islice

Matrix = list[list[int]]


def multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the product of ``a`` (m x n) and ``b`` (n x p) as an m x p matrix."""
    inner = len(b)
    if any(len(row) != inner for row in a):
        raise ValueError(
            f"matrix A must have {inner} columns to match the rows of matrix B"
        )
    width = len(b[0]) if b else 0
    if any(len(row) != width for row in b):
        raise ValueError("matrix B has rows of different lengths")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def format_matrix(rows: Sequence[Sequence[object]]) -> str:
    """Render a matrix one row per line, elements separated by spaces."""
    return "\n".join(" ".join(str(value) for value in row) for row in rows)


def _take(tokens: Iterator[str], count: int) -> list[int]:
    values = list(islice(tokens, count))
    if len(values) < count:
        raise ValueError(f"expected {count} more numbers, got {len(values)}")
    return [int(value) for value in values]


def _dimension(tokens: Iterator[str]) -> int:
    (value,) = _take(tokens, 1)
    if value < 0:
        raise ValueError(f"dimension must not be negative: {value}")
    return value


def _read_matrix(tokens: Iterator[str], rows: int, cols: int) -> Matrix:
    return [_take(tokens, cols) for _ in range(rows)]


def main(argv: Sequence[str] | None = None) -> int:
    """Read matrices from standard input and print their product, or display one."""
    parser = argparse.ArgumentParser(
        prog="dsakit-matrix",
        description=(
            "Multiply matrices read from standard input: the rows and columns of A, "
            "the columns of B, then the elements of A and of B in row order."
        ),
    )
    parser.add_argument(
        "--display",
        action="store_true",
        help="read the rows, columns and elements of one matrix and print it",
    )
    args = parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())

    try:
        if args.display:
            rows, cols = _dimension(tokens), _dimension(tokens)
            matrix = _read_matrix(tokens, rows, cols)
            print("Elements of the matrix:")
            print(format_matrix(matrix))
        else:
            m, n, p = _dimension(tokens), _dimension(tokens), _dimension(tokens)
            a = _read_matrix(tokens, m, n)
            b = _read_matrix(tokens, n, p)
            print(f"Resulting matrix C ({m}x{p}):")
            print(format_matrix(multiply(a, b)))
    except ValueError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())