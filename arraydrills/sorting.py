"""Classic comparison sorts that reorder a list in place."""

from __future__ import annotations

from typing import Any, MutableSequence


def _merge_sorted(items: list[Any]) -> list[Any]:
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    left = _merge_sorted(items[:mid])
    right = _merge_sorted(items[mid:])
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in ascending order in place using a stable merge sort."""
    arr[:] = _merge_sorted(list(arr))


def selection_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in ascending order in place using selection sort."""
    for start in range(len(arr)):
        smallest = min(range(start, len(arr)), key=arr.__getitem__)
        arr[start], arr[smallest] = arr[smallest], arr[start]