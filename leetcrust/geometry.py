"""Problems on points, heights and triangles."""

from __future__ import annotations

from itertools import accumulate, combinations
from typing import Sequence

__all__ = [
    "number_of_pairs",
    "trap",
    "triangle_number",
    "largest_triangle_area",
]


def number_of_pairs(points: Sequence[Sequence[int]]) -> int:
    """Count pairs (A, B) with A upper-left of B and no other point in their rectangle."""
    ordered = sorted(((x, y) for x, y in points), key=lambda p: (-p[1], p[0]))
    pairs = 0
    for index, (x, _) in enumerate(ordered):
        right: int | None = None
        for other_x, _ in ordered[index + 1 :]:
            if other_x < x or (right is not None and other_x >= right):
                continue
            right = other_x
            pairs += 1
    return pairs


def trap(height: Sequence[int]) -> int:
    """Units of rain water trapped between bars of the given heights."""
    if len(height) < 3:
        return 0
    left_max = list(accumulate(height, max))
    right_max = list(accumulate(reversed(height), max))[::-1]
    return sum(
        min(left, right) - h for h, left, right in zip(height, left_max, right_max)
    )


def triangle_number(nums: Sequence[int]) -> int:
    """Count triples of entries that can be the side lengths of a triangle."""
    sides = sorted(x for x in nums if x > 0)
    count = 0
    for k in range(len(sides) - 1, 1, -1):
        i, j = 0, k - 1
        while i < j:
            if sides[i] + sides[j] > sides[k]:
                count += j - i
                j -= 1
            else:
                i += 1
    return count


def _area(a: Sequence[int], b: Sequence[int], c: Sequence[int]) -> float:
    return (
        abs(a[0] * (b[1] - c[1]) + b[0] * (c[1] - a[1]) + c[0] * (a[1] - b[1])) / 2.0
    )


def largest_triangle_area(points: Sequence[Sequence[int]]) -> float:
    """Area of the largest triangle with vertices among the given points."""
    if len(points) < 3:
        raise ValueError("at least three points are needed")
    return max(0.0, *(_area(a, b, c) for a, b, c in combinations(points, 3)))