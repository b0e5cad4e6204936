"""String puzzles: comparison fixing and flipped-diagonal grids."""

from __future__ import annotations

__all__ = ["fix_expression", "count_ones_in_grid"]

_COMPARISONS = frozenset("<>=")


def fix_expression(s: str) -> str:
    """Return ``s`` with its comparison sign made true.

    ``s`` is two characters around a sign; if the sign is one of ``<``, ``>``
    or ``=`` it is replaced by the one that holds for the outer characters.
    Any other sign is left as it is.
    """
    if len(s) < 3:
        raise ValueError(f"expression too short: {s!r}")
    left, sign, right = s[0], s[1], s[2]
    if sign not in _COMPARISONS:
        return s
    if left < right:
        sign = "<"
    elif left > right:
        sign = ">"
    else:
        sign = "="
    return left + sign + right + s[3:]


def count_ones_in_grid(s: str) -> int:
    """Return the number of ones in the square grid built from ``s``.

    Row ``k`` of the grid is ``s`` with its ``k``-th bit flipped.
    """
    ones = s.count("1")
    zeros = s.count("0")
    # Every row keeps the ones of s, except that each one is flipped off in
    # one row and each zero is flipped on in one row.
    return len(s) * ones - ones + zeros