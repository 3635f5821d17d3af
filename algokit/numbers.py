"""Number utilities: factors, base conversion, Fibonacci, perfect numbers, knapsack."""

from __future__ import annotations

import math
from collections.abc import Sequence
from functools import lru_cache


def prime_factors(n: int) -> list[int]:
    """Return the prime factors of ``n`` in non-decreasing order, with repeats.

    Raises ValueError for ``n`` below 1.
    """
    if n < 1:
        raise ValueError("n must be a positive integer")
    factors: list[int] = []
    while n % 2 == 0:
        factors.append(2)
        n //= 2
    divisor = 3
    while divisor * divisor <= n:
        while n % divisor == 0:
            factors.append(divisor)
            n //= divisor
        divisor += 2
    if n > 2:
        factors.append(n)
    return factors


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as binary digits and return the value.

    Raises ValueError for negative ``n``.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    value = 0
    weight = 1
    while n:
        n, digit = divmod(n, 10)
        value += digit * weight
        weight *= 2
    return value


def decimal_to_binary(n: int) -> str:
    """Return the binary digits of ``n``; the result is empty when ``n`` is not positive."""
    digits: list[str] = []
    while n > 0:
        digits.append(str(n & 1))
        n >>= 1
    return "".join(reversed(digits))


@lru_cache(maxsize=None)
def _fib(n: int) -> int:
    if n == 0:
        return 0
    if n in (1, 2):
        return 1
    if n & 1:
        k = (n + 1) // 2
        return _fib(k) ** 2 + _fib(k - 1) ** 2
    k = n // 2
    return (2 * _fib(k - 1) + _fib(k)) * _fib(k)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number by fast doubling.

    Raises ValueError for negative ``n``.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    return _fib(n)


def is_perfect(n: int) -> bool:
    """Return True if ``n`` equals the sum of its divisors below itself."""
    return n == sum(d for d in range(1, n) if n % d == 0)


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of items fitting in ``capacity`` (0-1 knapsack).

    Raises ValueError if ``weights`` and ``values`` differ in length.
    """
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")

    @lru_cache(maxsize=None)
    def best(room: int, count: int) -> int:
        if count == 0 or room == 0:
            return 0
        weight, value = weights[count - 1], values[count - 1]
        skip = best(room, count - 1)
        if weight > room:
            return skip
        return max(value + best(room - weight, count - 1), skip)

    return best(capacity, len(weights))


def calculate(op: str, left: float, right: float) -> float:
    """Apply one of ``+ - * /`` to the operands.

    Division by zero gives an infinity, or NaN for zero over zero.
    Raises ValueError for any other operator.
    """
    left, right = float(left), float(right)
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if op == "/":
        if right == 0:
            if left == 0 or math.isnan(left):
                return math.nan
            return math.copysign(math.inf, left) * math.copysign(1.0, right)
        return left / right
    raise ValueError(f"operator is not correct: {op!r}")