import pytest

from arraydrills.medians import median_diff_arrays, median_equal_arrays


def test_median_equal():
    arr1 = [1, 12, 15, 26, 38]
    arr2 = [2, 13, 17, 30, 45]
    assert median_equal_arrays(arr1, arr2) == 16.0


def test_median_equal_single():
    assert median_equal_arrays([1], [3]) == 2.0


def test_median_equal_two():
    assert median_equal_arrays([1, 4], [2, 3]) == 2.5


def test_median_equal_empty():
    assert median_equal_arrays([], []) == 0.0


def test_median_equal_length_mismatch():
    with pytest.raises(ValueError):
        median_equal_arrays([1, 2], [3])


def test_median_diff():
    assert median_diff_arrays([1, 3], [2]) == 2.0


def test_median_diff_even():
    assert median_diff_arrays([1, 2], [3, 4]) == 2.5


def test_median_diff_one_empty():
    assert median_diff_arrays([], [1, 2, 3]) == 2.0
    assert median_diff_arrays([1, 2, 3, 4], []) == 2.5


def test_median_diff_argument_order_irrelevant():
    assert median_diff_arrays([2], [1, 3]) == median_diff_arrays([1, 3], [2]) == 2.0


def test_median_diff_both_empty():
    with pytest.raises(ValueError):
        median_diff_arrays([], [])