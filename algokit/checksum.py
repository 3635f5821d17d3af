"""One's complement checksums over fixed-width bit words."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _validate(words: Iterable[Sequence[int]]) -> tuple[list[list[int]], int]:
    rows = [list(word) for word in words]
    if not rows:
        raise ValueError("at least one word is needed")
    width = len(rows[0])
    if width == 0 or any(len(row) != width for row in rows):
        raise ValueError("all words must have the same, non-zero width")
    if any(bit not in (0, 1) for row in rows for bit in row):
        raise ValueError("words may hold only the bits 0 and 1")
    return rows, width


def _value(bits: Sequence[int]) -> int:
    value = 0
    for bit in bits:
        value = value * 2 + int(bit)
    return value


def ones_complement_sum(words: Iterable[Sequence[int]]) -> list[int]:
    """Add the words with end-around carry; return the sum as bits, most significant first.

    Raises ValueError for no words, words of differing width, or bits other than 0 and 1.
    """
    rows, width = _validate(words)
    mask = (1 << width) - 1
    total = 0
    for row in rows:
        total += _value(row)
        if total > mask:
            total = (total & mask) + 1
    return [(total >> shift) & 1 for shift in reversed(range(width))]


def checksum(words: Iterable[Sequence[int]]) -> list[int]:
    """Return the complement of the one's complement sum of ``words``."""
    return [1 - bit for bit in ones_complement_sum(words)]