"""Array problems: subarray sums, in-place compaction, merging and partitioning."""

from heapq import merge
from itertools import pairwise


def max_subarray_sum(arr):
    """Return the largest sum of any non-empty contiguous subarray (Kadane)."""
    if not arr:
        raise ValueError("max_subarray_sum() requires a non-empty sequence")
    best = ending = arr[0]
    for value in arr[1:]:
        ending = max(ending + value, value)
        best = max(best, ending)
    return best


def merge_sorted(nums1, m, nums2, n):
    """Merge the first ``n`` items of ``nums2`` into ``nums1`` in place.

    ``nums1`` holds ``m`` sorted values followed by room for ``n`` more.
    """
    nums1[: m + n] = list(merge(nums1[:m], nums2[:n]))


def move_zeros_to_end(arr):
    """Move every zero to the end of ``arr`` in place, keeping the order of the rest."""
    non_zero = [value for value in arr if value != 0]
    arr[:] = non_zero + [0] * (len(arr) - len(non_zero))


def remove_duplicates(nums):
    """Compact a sorted list so its first ``k`` items are unique; return ``k``."""
    if not nums:
        return 0
    unique = [nums[0]] + [cur for prev, cur in pairwise(nums) if cur != prev]
    nums[: len(unique)] = unique
    return len(unique)


def remove_element(nums, val):
    """Move every item not equal to ``val`` to the front in place; return their count."""
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def second_largest(arr):
    """Return the largest value strictly below the maximum, or -1 if there is none."""
    if not arr:
        raise ValueError("second_largest() requires a non-empty sequence")
    largest = arr[0]
    second = -1
    for value in arr[1:]:
        if value > largest:
            second, largest = largest, value
        elif second < value < largest:
            second = value
    return second


def sort_colors(nums):
    """Sort a list of 0s, 1s and 2s in place in a single pass."""
    low = mid = 0
    high = len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[mid], nums[low] = nums[low], nums[mid]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def max_profit(prices):
    """Return the best profit from one buy followed by one sell, or 0."""
    best = 0
    lowest = None
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        best = max(best, price - lowest)
    return best