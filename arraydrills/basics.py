"""Elementary array exercises: reversal, extremes, order statistics and merging."""

from __future__ import annotations

import heapq
from collections import Counter
from itertools import groupby
from typing import Any, MutableSequence, Sequence

_END = object()


def reverse_array(arr: MutableSequence[Any]) -> None:
    """Reverse ``arr`` in place."""
    arr.reverse()


def find_min_max(arr: Sequence[Any]) -> tuple[Any, Any] | None:
    """Return ``(minimum, maximum)`` of ``arr``, or None when it is empty."""
    if not arr:
        return None
    return min(arr), max(arr)


def _check_k(arr: Sequence[Any], k: int) -> bool:
    """Return True when a k-th element should be looked up."""
    if k >= len(arr):
        return False
    if k <= 0:
        raise ValueError("k must be at least 1")
    return True


def kth_smallest(arr: Sequence[Any], k: int) -> Any | None:
    """Return the k-th smallest element (1-based).

    None is returned when ``k`` is not smaller than the number of elements.
    """
    if not _check_k(arr, k):
        return None
    return heapq.nsmallest(k, arr)[-1]


def kth_largest(arr: Sequence[Any], k: int) -> Any | None:
    """Return the k-th largest element (1-based).

    None is returned when ``k`` is not smaller than the number of elements.
    """
    if not _check_k(arr, k):
        return None
    return heapq.nlargest(k, arr)[-1]


def sort_012(arr: MutableSequence[int]) -> None:
    """Sort a list holding only 0, 1 and 2 in place."""
    counts = Counter(arr)
    unexpected = set(counts) - {0, 1, 2}
    if unexpected:
        raise ValueError("Array contains values other than 0, 1, 2")
    arr[:] = [0] * counts[0] + [1] * counts[1] + [2] * counts[2]


def move_negative(arr: MutableSequence[int]) -> None:
    """Move every negative number in ``arr`` before the non-negative ones, in place."""
    boundary = 0
    for index, value in enumerate(arr):
        if value < 0:
            if index != boundary:
                arr[index], arr[boundary] = arr[boundary], arr[index]
            boundary += 1


def rotate_by_one(arr: MutableSequence[Any]) -> None:
    """Rotate ``arr`` right by one position in place."""
    if len(arr) > 1:
        arr.insert(0, arr.pop())


def find_union(arr1: Sequence[int], arr2: Sequence[int]) -> list[int]:
    """Return the distinct elements of two sorted sequences, in sorted order."""
    return [value for value, _ in groupby(heapq.merge(arr1, arr2))]


def find_intersection(arr1: Sequence[int], arr2: Sequence[int]) -> list[int]:
    """Return the distinct elements common to two sorted sequences."""
    result: list[int] = []
    left, right = iter(arr1), iter(arr2)
    a, b = next(left, _END), next(right, _END)
    while a is not _END and b is not _END:
        if a < b:
            a = next(left, _END)
        elif a > b:
            b = next(right, _END)
        else:
            if not result or result[-1] != a:
                result.append(a)
            a, b = next(left, _END), next(right, _END)
    return result