"""Problems on counting, frequencies, products and simple arithmetic."""

from __future__ import annotations

import heapq
import math
from bisect import bisect_left
from collections import Counter
from functools import reduce
from typing import Sequence

__all__ = [
    "max_kelements",
    "area_of_max_diagonal",
    "max_frequency_elements",
    "length_of_lis",
    "flower_game",
    "find_closest",
    "max_length",
    "gcd_vec",
    "lcm",
    "gcd",
]


def max_kelements(nums: Sequence[int], k: int) -> int:
    """Largest score from ``k`` picks of a maximum, each replaced by its third rounded up."""
    heap = [-x for x in nums]
    heapq.heapify(heap)
    score = 0
    for _ in range(k):
        if not heap:
            raise ValueError("nums must not be empty")
        largest = -heap[0]
        score += largest
        heapq.heapreplace(heap, -((largest + 2) // 3))
    return score


def area_of_max_diagonal(dimensions: Sequence[Sequence[int]]) -> int:
    """Area of the rectangle with the longest diagonal, the largest area breaking ties."""
    _, area = max(
        ((length * length + width * width, length * width) for length, width in dimensions),
        default=(0, 0),
    )
    return area


def max_frequency_elements(nums: Sequence[int]) -> int:
    """Total count of the elements whose frequency is the highest."""
    frequencies = Counter(nums).values()
    top = max(frequencies, default=0)
    return sum(freq for freq in frequencies if freq == top)


def length_of_lis(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    if not nums:
        raise ValueError("nums must not be empty")
    tails: list[int] = []
    for value in nums:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def flower_game(n: int, m: int) -> int:
    """Number of pairs (x, y) with 1 <= x <= n, 1 <= y <= m and x + y odd."""
    n_even, n_odd = n >> 1, (n + 1) >> 1
    m_even, m_odd = m >> 1, (m + 1) >> 1
    return n_even * m_odd + n_odd * m_even


def find_closest(x: int, y: int, z: int) -> int:
    """1 if ``x`` is closer to ``z``, 2 if ``y`` is, 0 on a tie."""
    dx, dy = abs(z - x), abs(z - y)
    if dx < dy:
        return 1
    if dx > dy:
        return 2
    return 0


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple of two integers."""
    return a * b // gcd(a, b)


def gcd_vec(nums: Sequence[int]) -> int:
    """Greatest common divisor of every number in ``nums``."""
    if not nums:
        raise ValueError("nums must not be empty")
    return reduce(gcd, nums[1:], nums[0])


def _is_product_equivalent(window: Sequence[int]) -> bool:
    divisor = gcd_vec(window)
    if divisor == 1:
        # Once the lcm falls behind the product it can never catch up again.
        multiple, product = 1, 1
        for value in window:
            multiple = lcm(multiple, value)
            product *= value
            if multiple != product:
                return False
        return True
    return divisor * reduce(lcm, window, 1) == math.prod(window)


def max_length(nums: Sequence[int]) -> int:
    """Length of the longest subarray whose product equals its gcd times its lcm."""
    for length in range(len(nums), 1, -1):
        if any(
            _is_product_equivalent(nums[start : start + length])
            for start in range(len(nums) - length + 1)
        ):
            return length
    return 1