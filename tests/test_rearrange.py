import pytest

from arraydrills.rearrange import (
    merge_inplace,
    next_permutation,
    rearrange_alternate,
    three_way_partition,
)


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([1, 2, 3], [1, 3, 2]),
        ([3, 2, 1], [1, 2, 3]),
        ([1, 1, 5], [1, 5, 1]),
        ([1, 3, 2], [2, 1, 3]),
        ([7], [7]),
        ([], []),
    ],
)
def test_next_permutation(nums, expected):
    next_permutation(nums)
    assert nums == expected


def test_next_permutation_cycles_through_all():
    nums = [1, 2, 3]
    seen = []
    for _ in range(6):
        seen.append(tuple(nums))
        next_permutation(nums)
    assert nums == [1, 2, 3]
    assert len(set(seen)) == 6


def test_rearrange():
    arr = [-5, -2, 5, 2, 4, 7, 1, 8, 0, -8]
    rearrange_alternate(arr)
    assert arr == [5, -5, 2, -2, 4, -8, 7, 1, 8, 0]


def test_rearrange_simple():
    arr = [1, 2, 3, -4, -1, 4]
    rearrange_alternate(arr)
    assert arr == [1, -4, 2, -1, 3, 4]


def test_rearrange_all_negative():
    arr = [-1, -2, -3]
    rearrange_alternate(arr)
    assert arr == [-1, -2, -3]


def test_three_way_partition():
    arr = [1, 14, 5, 20, 4, 2, 54, 20, 87, 98, 3, 1, 32]
    original = sorted(arr)
    low, high = 10, 20
    three_way_partition(arr, low, high)

    n = len(arr)
    i = 0
    while i < n and arr[i] < low:
        i += 1
    while i < n and low <= arr[i] <= high:
        i += 1
    while i < n and arr[i] > high:
        i += 1
    assert i == n
    assert sorted(arr) == original


def test_three_way_partition_empty():
    arr = []
    three_way_partition(arr, 1, 2)
    assert arr == []


def test_merge_inplace():
    arr1 = [1, 3, 5, 7]
    arr2 = [0, 2, 6, 8, 9]
    merge_inplace(arr1, arr2)
    assert arr1 == [0, 1, 2, 3]
    assert arr2 == [5, 6, 7, 8, 9]


def test_merge_inplace_empty():
    arr1 = [1, 2]
    arr2 = []
    merge_inplace(arr1, arr2)
    assert arr1 == [1, 2]
    assert arr2 == []


def test_merge_inplace_already_split():
    arr1 = [1, 2]
    arr2 = [3, 4]
    merge_inplace(arr1, arr2)
    assert arr1 == [1, 2]
    assert arr2 == [3, 4]


def test_merge_inplace_fully_swapped():
    arr1 = [10, 20, 30]
    arr2 = [1, 2]
    merge_inplace(arr1, arr2)
    assert arr1 == [1, 2, 10]
    assert arr2 == [20, 30]