"""Problems on one-dimensional integer arrays."""

from __future__ import annotations

from typing import MutableSequence, Sequence

__all__ = ["remove_duplicates", "max_width_ramp"]


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Keep at most two copies of each value of a sorted list, in place.

    The kept values are moved to the front of ``nums`` and their count is
    returned; entries past that count are left as they were.
    """
    kept: list[int] = []
    for value in nums:
        if len(kept) < 2 or kept[-2] != value:
            kept.append(value)
    nums[: len(kept)] = kept
    return len(kept)


def max_width_ramp(nums: Sequence[int]) -> int:
    """Largest ``j - i`` with ``i <= j`` and ``nums[i] <= nums[j]``."""
    candidates: list[int] = []
    for index, value in enumerate(nums):
        if not candidates or value < nums[candidates[-1]]:
            candidates.append(index)

    best = 0
    for right in reversed(range(len(nums))):
        while candidates and nums[candidates[-1]] <= nums[right]:
            best = max(best, right - candidates.pop())
    return best