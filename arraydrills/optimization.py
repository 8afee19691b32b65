"""Optimisation exercises: big factorials, distributions, heights, swaps and intervals."""

from __future__ import annotations

import math
from typing import MutableSequence, Sequence


def factorial(n: int) -> list[int]:
    """Return the decimal digits of ``n!``, most significant first."""
    return [int(digit) for digit in str(math.factorial(n))]


def chocolate_distribution(arr: MutableSequence[int], m: int) -> int:
    """Return the smallest spread between the largest and smallest of ``m`` chosen packets.

    0 for no packets or no students, -1 when there are fewer packets than students.
    ``arr`` is sorted in place.
    """
    n = len(arr)
    if n == 0 or m == 0:
        return 0
    if m > n:
        return -1
    arr.sort()
    return min(arr[i + m - 1] - arr[i] for i in range(n - m + 1))


def min_height_diff(arr: MutableSequence[int], k: int) -> int:
    """Return the smallest spread after moving each height up or down by ``k``.

    Heights may not become negative. ``arr`` is sorted in place.
    """
    n = len(arr)
    if n <= 1:
        return 0
    arr.sort()
    best = arr[-1] - arr[0]
    smallest = arr[0] + k
    largest = arr[-1] - k
    for current, following in zip(arr, arr[1:]):
        low = min(smallest, following - k)
        high = max(largest, current + k)
        if low < 0:
            continue
        best = min(best, high - low)
    return best


def min_swaps(arr: Sequence[int], k: int) -> int:
    """Return the fewest swaps that bring all elements ``<= k`` together."""
    window = sum(1 for num in arr if num <= k)
    bad = sum(1 for num in arr[:window] if num > k)
    best = bad
    for leaving, entering in zip(arr, arr[window:]):
        if leaving > k:
            bad -= 1
        if entering > k:
            bad += 1
        best = min(best, bad)
    return best


def min_ops_palindrome(arr: Sequence[int]) -> int:
    """Return the fewest merges of adjacent elements that turn ``arr`` into a palindrome."""
    if not arr:
        raise ValueError("array must not be empty")
    values = list(arr)
    ops = 0
    i, j = 0, len(values) - 1
    while i <= j:
        if values[i] == values[j]:
            i += 1
            j -= 1
        elif values[i] < values[j]:
            i += 1
            values[i] += values[i - 1]
            ops += 1
        else:
            j -= 1
            values[j] += values[j + 1]
            ops += 1
    return ops


def merge_intervals(intervals: list[list[int]]) -> list[list[int]]:
    """Return the overlapping intervals merged, ordered by start.

    ``intervals`` is sorted in place by start.
    """
    if not intervals:
        return []
    intervals.sort(key=lambda interval: interval[0])
    merged: list[list[int]] = [list(intervals[0])]
    for current in intervals[1:]:
        last = merged[-1]
        if current[0] <= last[1]:
            last[1] = max(last[1], current[1])
        else:
            merged.append(list(current))
    return merged