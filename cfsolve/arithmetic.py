"""Small number-theory puzzles on integers."""

from __future__ import annotations

__all__ = ["min_operations", "can_make_ap", "count_extremely_round"]

# Beyond this divisor, growing it further never pays off.
_DIVISOR_CAP = 6


def _divisions_to_zero(a: int, b: int) -> int:
    steps = 0
    while a > 0:
        a //= b
        steps += 1
    return steps


def min_operations(a: int, b: int) -> int:
    """Return the fewest operations to reduce ``a`` to zero.

    An operation either replaces ``a`` by ``a // b`` or increments ``b``.
    """
    if b >= _DIVISOR_CAP:
        return _divisions_to_zero(a, b)
    return min(
        (divisor - b) + _divisions_to_zero(a, divisor)
        for divisor in range(max(b, 2), _DIVISOR_CAP + 1)
    )


def can_make_ap(a: int, b: int, c: int) -> bool:
    """Return whether multiplying one of ``a``, ``b``, ``c`` by a positive
    integer can make the triple an arithmetic progression."""
    return (
        (2 * b - c > 0 and (2 * b - c) % a == 0)
        or (a + c) % (2 * b) == 0
        or (2 * b - a > 0 and (2 * b - a) % c == 0)
    )


def count_extremely_round(n: int) -> int:
    """Return how many integers in ``1..n`` have exactly one non-zero digit."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    digits = str(n)
    return 9 * (len(digits) - 1) + int(digits[0])