"""Problems on intervals, schedules and day-based costs."""

from __future__ import annotations

from typing import Sequence

__all__ = [
    "min_groups",
    "insert",
    "binary_search",
    "earliest_finish_time",
    "mincost_tickets",
]


def min_groups(intervals: Sequence[Sequence[int]]) -> int:
    """Minimum number of groups so that no two inclusive intervals in a group overlap."""
    starts = sorted(start for start, _ in intervals)
    ends = sorted(end for _, end in intervals)

    groups = 0
    end_index = 0
    for start in starts:
        if start > ends[end_index]:
            end_index += 1
        else:
            groups += 1
    return groups


def insert(
    intervals: Sequence[Sequence[int]], new_interval: Sequence[int]
) -> list[list[int]]:
    """Insert an interval into a sorted list of disjoint intervals, merging overlaps."""
    low, high = new_interval
    result: list[list[int]] = []
    inserted = False
    for start, end in intervals:
        if end < low:
            result.append([start, end])
        elif start > high:
            if not inserted:
                result.append([low, high])
                inserted = True
            result.append([start, end])
        else:
            low = min(low, start)
            high = max(high, end)
    if not inserted:
        result.append([low, high])
    return result


def binary_search(intervals: Sequence[Sequence[int]], x: int) -> tuple[int, bool]:
    """Find the first interval whose end is at least ``x``.

    Returns its index and whether ``x`` lies inside it; past the last
    interval the index is ``len(intervals)`` and the flag is False.
    """
    if not intervals:
        raise ValueError("intervals must not be empty")
    lo, hi = 0, len(intervals) - 1
    while lo < hi:
        mid = (lo + hi) >> 1
        if intervals[mid][1] < x:
            lo = mid + 1
        else:
            hi = mid
    if lo == len(intervals) - 1 and x > intervals[lo][1]:
        return lo + 1, False
    return lo, x >= intervals[lo][0]


def earliest_finish_time(
    land_start_time: Sequence[int],
    land_duration: Sequence[int],
    water_start_time: Sequence[int],
    water_duration: Sequence[int],
) -> int:
    """Earliest time at which one land ride and one water ride can both be finished."""
    land = list(zip(land_start_time, land_duration))
    water = list(zip(water_start_time, water_duration))
    end_land = min(start + duration for start, duration in land)
    end_water = min(start + duration for start, duration in water)

    land_then_water = min(max(start, end_land) + duration for start, duration in water)
    water_then_land = min(max(start, end_water) + duration for start, duration in land)
    return min(land_then_water, water_then_land)


def mincost_tickets(days: Sequence[int], costs: Sequence[int]) -> int:
    """Cheapest cost of 1-, 7- and 30-day passes covering every travel day."""
    if not days:
        raise ValueError("days must not be empty")
    last = days[-1]
    travel = set(days)
    one_day, seven_days, thirty_days = costs[0], costs[1], costs[2]

    dp = [0] * (last + 1)
    for day in range(1, last + 1):
        if day in travel:
            dp[day] = min(
                one_day + dp[day - 1],
                seven_days + (dp[day - 7] if day >= 7 else 0),
                thirty_days + (dp[day - 30] if day >= 30 else 0),
            )
        else:
            dp[day] = dp[day - 1]
    return dp[last]