"""Problems solved with bit manipulation."""

from __future__ import annotations

from functools import reduce
from itertools import groupby
from operator import xor
from typing import Sequence

__all__ = [
    "xor_all_nums",
    "minimize_xor",
    "find_the_prefix_common_array",
    "does_valid_array_exist",
    "make_the_integer_zero",
    "can_sort_array",
    "set_bits",
    "min_operations",
]

_MASK_31 = (1 << 31) - 1


def set_bits(n: int) -> int:
    """Number of set bits in a positive integer; zero for zero or negative input."""
    return bin(n).count("1") if n > 0 else 0


def xor_all_nums(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """XOR of ``a ^ b`` over every pair taking ``a`` from nums1 and ``b`` from nums2.

    Only the lowest 31 bits of each number are taken into account.
    """
    result = 0
    if len(nums2) % 2 == 1:
        result ^= reduce(xor, nums1, 0)
    if len(nums1) % 2 == 1:
        result ^= reduce(xor, nums2, 0)
    return result & _MASK_31


def minimize_xor(num1: int, num2: int) -> int:
    """Number with as many set bits as ``num2`` whose XOR with ``num1`` is smallest.

    When ``num2`` has no set bits, ``num1`` is returned unchanged.
    """
    wanted = set_bits(num2)
    if wanted == 0:
        return num1

    # Keep the highest set bits of num1 first.
    for shift in range(30, -1, -1):
        bit = 1 << shift
        if num1 & bit:
            wanted -= 1
            if wanted == 0:
                return num1 & ~(bit - 1)

    # num1 has too few set bits: fill its lowest clear bits.
    bit = 1
    while wanted > 0:
        if not num1 & bit:
            wanted -= 1
        bit <<= 1
    return num1 | (bit - 1)


def find_the_prefix_common_array(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """For each prefix length, how many values appear in both prefixes of ``a`` and ``b``."""
    seen_a: set[int] = set()
    seen_b: set[int] = set()
    common = 0
    result: list[int] = []
    for x, y in zip(a, b):
        if x not in seen_a:
            seen_a.add(x)
            common += x in seen_b
        if y not in seen_b:
            seen_b.add(y)
            common += y in seen_a
        result.append(common)
    return result


def does_valid_array_exist(derived: Sequence[int]) -> bool:
    """Tell whether a binary array exists whose cyclic neighbour XORs give ``derived``."""
    if not derived:
        raise ValueError("derived must not be empty")
    return reduce(xor, derived[:-1], 0) == derived[-1]


def make_the_integer_zero(num1: int, num2: int) -> int:
    """Fewest operations ``num1 -= 2**i + num2`` reaching zero, or -1 if impossible."""
    remainder = num1 - num2
    operations = 1
    while remainder > 0:
        # ``operations`` powers of two can add up to ``remainder`` when there are
        # at least as many of them as its set bits and no more than its value.
        if operations <= remainder and remainder.bit_count() <= operations:
            return operations
        operations += 1
        remainder -= num2
    return -1


def can_sort_array(nums: Sequence[int]) -> bool:
    """Tell whether swapping adjacent numbers with equal set-bit counts can sort ``nums``."""
    if not nums:
        raise ValueError("nums must not be empty")
    previous_max = -1
    for _, run in groupby(nums, key=set_bits):
        group = list(run)
        if min(group) < previous_max:
            return False
        previous_max = max(previous_max, max(group))
    return True


def _base4_digits(n: int) -> int:
    digits = 0
    while n > 0:
        n >>= 2
        digits += 1
    return digits


def min_operations(queries: Sequence[Sequence[int]]) -> int:
    """Total operations to zero every range ``[l, r]``, each dividing two numbers by 4."""
    total = 0
    for low, high in queries:
        if high < 1:
            raise ValueError(f"range end must be at least 1, got {high}")
        low_digits = _base4_digits(low)
        high_digits = _base4_digits(high)

        if low_digits == high_digits:
            operations = (high - low + 1) * low_digits
        else:
            operations = (4**low_digits - low) * low_digits
            operations += (high - 4 ** (high_digits - 1) + 1) * high_digits
            operations += sum(
                (4**k - 4 ** (k - 1)) * k for k in range(low_digits + 1, high_digits)
            )
        total += (operations + 1) >> 1
    return total