"""In-place rearrangements: permutations, alternation, partitioning and merging."""

from __future__ import annotations

from bisect import bisect_left
from typing import Callable, MutableSequence


def next_permutation(nums: MutableSequence[int]) -> None:
    """Turn ``nums`` into its next lexicographic permutation, wrapping to the lowest."""
    n = len(nums)
    if n <= 1:
        return
    pivot = next((i for i in range(n - 2, -1, -1) if nums[i] < nums[i + 1]), None)
    if pivot is None:
        nums.reverse()
        return
    successor = next(j for j in range(n - 1, pivot, -1) if nums[j] > nums[pivot])
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1 :] = reversed(nums[pivot + 1 :])


def _is_positive(value: int) -> bool:
    return value >= 0


def _is_negative(value: int) -> bool:
    return value < 0


def _find_next(
    arr: MutableSequence[int], start: int, wanted: Callable[[int], bool]
) -> int | None:
    return next((k for k in range(start, len(arr)) if wanted(arr[k])), None)


def rearrange_alternate(arr: MutableSequence[int]) -> None:
    """Alternate non-negative and negative values in place, keeping their relative order.

    Positions 0, 2, 4, ... take non-negative values; once one kind runs out,
    the rest stays as it is.
    """
    index = 0
    while index < len(arr):
        wanted = _is_positive if index % 2 == 0 else _is_negative
        if not wanted(arr[index]):
            found = _find_next(arr, index + 1, wanted)
            if found is None:
                break
            arr.insert(index, arr.pop(found))
        index += 1


def three_way_partition(arr: MutableSequence[int], low_val: int, high_val: int) -> None:
    """Reorder ``arr`` in place into values below, inside and above ``[low_val, high_val]``."""
    start, current, end = 0, 0, len(arr) - 1
    while current <= end:
        value = arr[current]
        if value < low_val:
            arr[current], arr[start] = arr[start], arr[current]
            current += 1
            start += 1
        elif value > high_val:
            arr[current], arr[end] = arr[end], arr[current]
            end -= 1
        else:
            current += 1


def merge_inplace(arr1: MutableSequence[int], arr2: MutableSequence[int]) -> None:
    """Merge two sorted lists so ``arr1`` holds the smallest values and ``arr2`` the rest.

    Both lists keep their lengths and end up sorted.
    """
    if not arr2:
        return
    for i, value in enumerate(arr1):
        if value > arr2[0]:
            arr1[i], displaced = arr2[0], value
            del arr2[0]
            arr2.insert(bisect_left(arr2, displaced), displaced)