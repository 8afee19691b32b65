"""Exercises on contiguous runs: sums, products, windows, rain water and jumps."""

from __future__ import annotations

from itertools import accumulate
from typing import Sequence


def max_subarray_sum(arr: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane); 0 for empty input."""
    if not arr:
        return 0
    best = current = arr[0]
    for item in arr[1:]:
        current = max(item, current + item)
        best = max(best, current)
    return best


def max_product(nums: Sequence[int]) -> int:
    """Return the largest product of a non-empty contiguous run; 0 for empty input."""
    if not nums:
        return 0
    high = low = result = nums[0]
    for num in nums[1:]:
        candidates = (num, high * num, low * num)
        high, low = max(candidates), min(candidates)
        result = max(result, high)
    return result


def smallest_subarray_gt_x(arr: Sequence[int], x: int) -> int:
    """Return the length of the shortest run whose sum exceeds ``x``, or 0 if none does."""
    n = len(arr)
    min_len = n + 1
    start = end = 0
    total = 0
    while end < n:
        while total <= x and end < n:
            total += arr[end]
            end += 1
        while total > x and start < n:
            min_len = min(min_len, end - start)
            total -= arr[start]
            start += 1
    return 0 if min_len > n else min_len


def has_zero_sum_subarray(arr: Sequence[int]) -> bool:
    """Return True when some non-empty contiguous run sums to zero."""
    seen = {0}
    for prefix in accumulate(arr):
        if prefix in seen:
            return True
        seen.add(prefix)
    return False


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers present in ``nums``."""
    values = set(nums)
    longest = 0
    for num in values:
        if num - 1 in values:
            continue
        current = num
        while current + 1 in values:
            current += 1
        longest = max(longest, current - num + 1)
    return longest


def trap_rain_water(height: Sequence[int]) -> int:
    """Return the amount of water held between the bars of ``height``."""
    if len(height) <= 2:
        return 0
    left, right = 0, len(height) - 1
    left_max = right_max = 0
    water = 0
    while left < right:
        if height[left] <= height[right]:
            if height[left] >= left_max:
                left_max = height[left]
            else:
                water += left_max - height[left]
            left += 1
        else:
            if height[right] >= right_max:
                right_max = height[right]
            else:
                water += right_max - height[right]
            right -= 1
    return water


def min_jumps(arr: Sequence[int]) -> int:
    """Return the fewest jumps from the first to the last index, or -1 if it cannot be reached.

    Each element gives the longest jump allowed from its position.
    """
    n = len(arr)
    if n <= 1:
        return 0
    if arr[0] == 0:
        return -1
    max_reach = steps = arr[0]
    jumps = 1
    for index in range(1, n):
        if index == n - 1:
            return jumps
        max_reach = max(max_reach, index + arr[index])
        steps -= 1
        if steps == 0:
            jumps += 1
            if index >= max_reach:
                return -1
            steps = max_reach - index
    return -1