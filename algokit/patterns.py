"""Text patterns and sparse matrix triplets."""

from __future__ import annotations

from collections.abc import Sequence


def triangle(lines: int, inverted: bool) -> list[str]:
    """Return the rows of a star triangle, growing or, if ``inverted``, shrinking.

    Raises ValueError if ``lines`` is not positive.
    """
    if lines <= 0:
        raise ValueError("number of lines must be positive")
    rows = ["*" * width for width in range(1, lines + 1)]
    return rows[::-1] if inverted else rows


def sparse_triplets(matrix: Sequence[Sequence[int]]) -> list[tuple[int, int, int]]:
    """Return the triplet form of ``matrix``.

    The first triplet is (rows, columns, non-zero count); each following one is
    (row, column, value) for a non-zero entry, in row-major order.
    Raises ValueError if the rows differ in length.
    """
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("all matrix rows must have the same length")
    entries = [
        (i, j, value)
        for i, row in enumerate(matrix)
        for j, value in enumerate(row)
        if value != 0
    ]
    return [(rows, cols, len(entries)), *entries]