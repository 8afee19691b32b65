"""Medians of two sorted sequences, of equal or different lengths."""

from __future__ import annotations

import math
import sys
from typing import Sequence


def _median(arr: Sequence[int]) -> float:
    n = len(arr)
    if n % 2 == 0:
        return (arr[n // 2] + arr[n // 2 - 1]) / 2
    return float(arr[n // 2])


def _median_of_equal(arr1: Sequence[int], arr2: Sequence[int]) -> float:
    n = len(arr1)
    if n == 0:
        return 0.0
    if n == 1:
        return (arr1[0] + arr2[0]) / 2
    if n == 2:
        return (max(arr1[0], arr2[0]) + min(arr1[1], arr2[1])) / 2

    m1 = _median(arr1)
    m2 = _median(arr2)
    if abs(m1 - m2) < sys.float_info.epsilon:
        return m1

    half = n // 2
    drop = half - 1 if n % 2 == 0 else half
    if m1 < m2:
        return _median_of_equal(arr1[drop:], arr2[: half + 1])
    return _median_of_equal(arr1[: half + 1], arr2[drop:])


def median_equal_arrays(arr1: Sequence[int], arr2: Sequence[int]) -> float:
    """Return the median of two sorted sequences of the same length; 0.0 when empty."""
    if len(arr1) != len(arr2):
        raise ValueError("arrays must have the same length")
    return _median_of_equal(arr1, arr2)


def median_diff_arrays(arr1: Sequence[int], arr2: Sequence[int]) -> float:
    """Return the median of two sorted sequences of any lengths.

    0.0 is returned if the inputs turn out not to be sorted.
    """
    if len(arr1) > len(arr2):
        arr1, arr2 = arr2, arr1
    n, m = len(arr1), len(arr2)
    if n + m == 0:
        raise ValueError("median of two empty arrays is undefined")

    low, high = 0, n
    while low <= high:
        part_x = (low + high) // 2
        part_y = (n + m + 1) // 2 - part_x

        max_left_x = -math.inf if part_x == 0 else arr1[part_x - 1]
        min_right_x = math.inf if part_x == n else arr1[part_x]
        max_left_y = -math.inf if part_y == 0 else arr2[part_y - 1]
        min_right_y = math.inf if part_y == m else arr2[part_y]

        if max_left_x <= min_right_y and max_left_y <= min_right_x:
            left = max(max_left_x, max_left_y)
            if (n + m) % 2 == 0:
                return (left + min(min_right_x, min_right_y)) / 2
            return float(left)
        if max_left_x > min_right_y:
            high = part_x - 1
        else:
            low = part_x + 1
    return 0.0