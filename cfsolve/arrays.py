"""Puzzles on integer arrays."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import accumulate

__all__ = [
    "make_beautiful",
    "smallest_balanced_split",
    "longest_zero_run",
    "unit_array_operations",
    "raspberries_operations",
    "twice_score",
    "move_to_end_sums",
]


def make_beautiful(a: Sequence[int]) -> list[int] | None:
    """Reorder the non-decreasing array ``a`` so that no element equals the
    sum of the elements before it.

    Returns the reordered list, or ``None`` when every element is the same
    and no order works.
    """
    items = list(a)
    if len(set(items)) == 1:
        return None
    if any(x == prefix for x, prefix in zip(items[1:], accumulate(items))):
        # Moving the largest element to the front makes every later prefix
        # sum exceed any element.
        items[0], items[-1] = items[-1], items[0]
    return items


def smallest_balanced_split(a: Sequence[int]) -> int | None:
    """Return the smallest ``k`` in ``1..len(a)-1`` for which ``a[:k]`` and
    ``a[k:]`` hold the same number of twos, or ``None`` if there is none.

    With elements drawn from 1 and 2 this is where the two products match.
    """
    remaining = sum(1 for x in a if x == 2)
    seen = 0
    for k, x in enumerate(a[:-1], start=1):
        if x == 2:
            seen += 1
            remaining -= 1
        if seen == remaining:
            return k
    return None


def longest_zero_run(a: Sequence[int]) -> int:
    """Return the length of the longest run of zeros; a one ends a run."""
    best = run = 0
    for x in a:
        if x == 0:
            run += 1
            best = max(best, run)
        elif x == 1:
            run = 0
    return best


def unit_array_operations(a: Sequence[int]) -> int:
    """Return the fewest ``-1`` to ``1`` flips that make the sum non-negative
    and the product equal to one."""
    if any(x not in (1, -1) for x in a):
        raise ValueError("array elements must be 1 or -1")
    negatives = sum(1 for x in a if x == -1)
    positives = len(a) - negatives
    operations = 0
    while positives < negatives:
        negatives -= 1
        positives += 1
        operations += 1
    if negatives % 2 == 1:
        operations += 1
    return operations


def raspberries_operations(a: Sequence[int], k: int) -> int:
    """Return the fewest unit increments that make the product of ``a``
    divisible by ``k``, for ``k`` from 2 to 5."""
    if k not in range(2, 6):
        raise ValueError(f"k must be between 2 and 5, got {k}")
    if not a:
        raise ValueError("array must not be empty")
    if any(x % k == 0 for x in a):
        return 0
    if k == 2:
        return 1
    if k == 3:
        return 1 if any(x % 3 == 2 for x in a) else 2
    if k == 4:
        if len(a) == 1:
            return 4 - a[0] % 4
        evens = sum(1 for x in a if x % 2 == 0)
        if evens >= 2:
            return 0
        if evens == 1 or any(x % 4 == 3 for x in a):
            return 1
        return 2
    return min(5 - x % 5 for x in a)


def twice_score(a: Sequence[int]) -> int:
    """Return how many disjoint pairs of equal non-zero values ``a`` holds."""
    return sum(count // 2 for value, count in Counter(a).items() if value != 0)


def move_to_end_sums(a: Sequence[int]) -> list[int]:
    """Return, for each ``i`` from 0, the largest sum of the last ``i + 1``
    positions reachable by moving one element to the end.

    That is the sum of the last ``i`` elements plus the largest of the rest.
    """
    if not a:
        return []
    prefix_max = list(accumulate(a, max))
    suffix_sums = accumulate(reversed(a), initial=0)
    return [
        tail + head_max
        for tail, head_max in zip(suffix_sums, reversed(prefix_max))
    ]