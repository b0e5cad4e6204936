"""Geometry puzzles on rectangles and target grids."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["max_doubled_area", "target_score"]

_TARGET_SIZE = 10


def _span(points: Sequence[int], side: str) -> int:
    if not points:
        raise ValueError(f"no points on the {side} side")
    return points[-1] - points[0]


def max_doubled_area(
    w: int,
    h: int,
    bottom: Sequence[int],
    top: Sequence[int],
    left: Sequence[int],
    right: Sequence[int],
) -> int:
    """Return twice the largest triangle area with two vertices on one side.

    Each side lists its points' coordinates in ascending order. The third
    vertex is taken on the opposite side, so the base is the side's widest
    span and the height is the rectangle's other dimension.
    """
    return max(
        0,
        _span(bottom, "bottom") * h,
        _span(top, "top") * h,
        _span(left, "left") * w,
        _span(right, "right") * w,
    )


def target_score(grid: Sequence[str]) -> int:
    """Return the score of the ``X`` hits on a 10x10 target.

    Rings score 1 on the outer border up to 5 in the centre.
    """
    if len(grid) != _TARGET_SIZE or any(len(row) != _TARGET_SIZE for row in grid):
        raise ValueError("target must be 10 rows of 10 cells")
    last = _TARGET_SIZE - 1
    return sum(
        min(r, c, last - r, last - c) + 1
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == "X"
    )