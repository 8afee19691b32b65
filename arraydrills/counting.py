"""Counting and lookup exercises: inversions, duplicates, subsets, pairs and triplets."""

from __future__ import annotations

from collections import Counter
from typing import MutableSequence, Sequence

_END = object()


def _sort_and_count(items: list[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return items, 0
    mid = len(items) // 2
    left, left_count = _sort_and_count(items[:mid])
    right, right_count = _sort_and_count(items[mid:])
    count = left_count + right_count
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            count += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def count_inversions(arr: MutableSequence[int]) -> int:
    """Return the number of pairs ``i < j`` with ``arr[i] > arr[j]``.

    As a side effect ``arr`` is left sorted in ascending order.
    """
    ordered, count = _sort_and_count(list(arr))
    arr[:] = ordered
    return count


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the repeated value in ``nums`` using cycle detection.

    ``nums`` holds ``n + 1`` integers in the range ``[1, n]`` with one value repeated.
    """
    tortoise = hare = nums[0]
    while True:
        tortoise = nums[tortoise]
        hare = nums[nums[hare]]
        if tortoise == hare:
            break
    first, second = nums[0], tortoise
    while first != second:
        first = nums[first]
        second = nums[second]
    return first


def is_subset(arr1: Sequence[int], arr2: Sequence[int]) -> bool:
    """Return True when every element of ``arr2`` occurs in ``arr1`` at least as often."""
    available = Counter(arr1)
    return all(available[value] >= needed for value, needed in Counter(arr2).items())


def count_more_than_n_by_k(nums: Sequence[int], k: int) -> list[int]:
    """Return, in ascending order, the values occurring more than ``len(nums) // k`` times."""
    if k == 0 or not nums:
        return []
    threshold = len(nums) // k
    return sorted(value for value, count in Counter(nums).items() if count > threshold)


def pair_sum(arr: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Return every pair ``(earlier, later)`` of elements summing to ``target``.

    Pairs appear in the order their second element is reached.
    """
    seen: Counter[int] = Counter()
    pairs: list[tuple[int, int]] = []
    for num in arr:
        complement = target - num
        pairs.extend([(complement, num)] * seen[complement])
        seen[num] += 1
    return pairs


def triplet_sum(arr: MutableSequence[int], target: int) -> bool:
    """Return True when three distinct positions of ``arr`` sum to ``target``.

    ``arr`` is sorted in place.
    """
    n = len(arr)
    if n < 3:
        return False
    arr.sort()
    for i in range(n - 2):
        left, right = i + 1, n - 1
        while left < right:
            total = arr[i] + arr[left] + arr[right]
            if total == target:
                return True
            if total < target:
                left += 1
            else:
                right -= 1
    return False


def common_elements(
    arr1: Sequence[int], arr2: Sequence[int], arr3: Sequence[int]
) -> list[int]:
    """Return the distinct values present in all three sorted sequences."""
    result: list[int] = []
    it1, it2, it3 = iter(arr1), iter(arr2), iter(arr3)
    a, b, c = next(it1, _END), next(it2, _END), next(it3, _END)
    while a is not _END and b is not _END and c is not _END:
        if a == b == c:
            if not result or result[-1] != a:
                result.append(a)
            a, b, c = next(it1, _END), next(it2, _END), next(it3, _END)
        elif a < b:
            a = next(it1, _END)
        elif b < c:
            b = next(it2, _END)
        else:
            c = next(it3, _END)
    return result