import pytest

from dsakit.arrays import (
    max_profit,
    max_subarray_sum,
    merge_sorted,
    move_zeros_to_end,
    remove_duplicates,
    remove_element,
    second_largest,
    sort_colors,
)


def test_max_subarray_all_positive_is_total():
    arr = [1, 2, 3, 4]
    assert max_subarray_sum(arr) == sum(arr)


def test_max_subarray_all_negative_is_largest_element():
    assert max_subarray_sum([-5, -2, -7]) == -2


def test_max_subarray_mixed():
    assert max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_max_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_merge_sorted_in_place():
    nums1 = [1, 2, 3, 0, 0, 0]
    nums2 = [2, 5, 6]
    merge_sorted(nums1, 3, nums2, 3)
    assert nums1 == sorted([1, 2, 3, 2, 5, 6])


def test_merge_sorted_into_empty_prefix():
    nums1 = [0]
    merge_sorted(nums1, 0, [1], 1)
    assert nums1 == [1]


def test_merge_sorted_with_empty_second():
    nums1 = [1]
    merge_sorted(nums1, 1, [], 0)
    assert nums1 == [1]


def test_move_zeros_to_end():
    original = [0, 1, 0, 3, 12]
    arr = list(original)
    move_zeros_to_end(arr)
    non_zero = [x for x in original if x != 0]
    assert arr[: len(non_zero)] == non_zero
    assert arr[len(non_zero):] == [0] * original.count(0)


def test_remove_duplicates():
    original = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    nums = list(original)
    k = remove_duplicates(nums)
    assert k == len(set(original))
    assert nums[:k] == sorted(set(original))


def test_remove_duplicates_empty():
    assert remove_duplicates([]) == 0


def test_remove_element():
    original = [0, 1, 2, 2, 3, 0, 4, 2]
    nums = list(original)
    k = remove_element(nums, 2)
    assert k == len(original) - original.count(2)
    assert nums[:k] == [x for x in original if x != 2]


@pytest.mark.parametrize(
    "arr, expected",
    [([12, 35, 1, 10, 34, 1], 34), ([10, 5, 10], 5), ([10, 10, 10], -1), ([5], -1)],
)
def test_second_largest(arr, expected):
    assert second_largest(arr) == expected


def test_second_largest_empty_raises():
    with pytest.raises(ValueError):
        second_largest([])


@pytest.mark.parametrize("nums", [[2, 0, 2, 1, 1, 0], [2, 0, 1], [], [1], [2, 2, 0, 0]])
def test_sort_colors(nums):
    expected = sorted(nums)
    sort_colors(nums)
    assert nums == expected


def test_max_profit():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


def test_max_profit_decreasing_is_zero():
    assert max_profit([7, 6, 4, 3, 1]) == 0


def test_max_profit_empty_is_zero():
    assert max_profit([]) == 0