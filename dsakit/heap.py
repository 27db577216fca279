"""Selection and sorting problems built on binary heaps."""

import heapq
from collections import Counter


def _check_k(k, available):
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    if available == 0:
        raise ValueError("the sequence is empty")


def kth_largest(arr, k):
    """Return the k-th largest item of ``arr``.

    When ``arr`` has fewer than ``k`` items the smallest item is returned.
    """
    _check_k(k, len(arr))
    return heapq.nlargest(k, arr)[-1]


def kth_smallest(arr, k):
    """Return the k-th smallest item of ``arr``.

    When ``arr`` has fewer than ``k`` items the largest item is returned.
    """
    _check_k(k, len(arr))
    return heapq.nsmallest(k, arr)[-1]


def _sift_down(nums, size, root):
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and nums[left] > nums[largest]:
            largest = left
        if right < size and nums[right] > nums[largest]:
            largest = right
        if largest == root:
            return
        nums[root], nums[largest] = nums[largest], nums[root]
        root = largest


def heap_sort(nums):
    """Sort ``nums`` in place in ascending order with a max-heap and return it."""
    size = len(nums)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(nums, size, root)
    for end in range(size - 1, 0, -1):
        nums[0], nums[end] = nums[end], nums[0]
        _sift_down(nums, end, 0)
    return nums


def top_k_largest(nums, k):
    """Return the ``k`` largest items of ``nums`` in ascending order."""
    if not 0 <= k <= len(nums):
        raise ValueError(f"k must be between 0 and {len(nums)}, got {k}")
    return sorted(heapq.nlargest(k, nums))


def top_k_frequent(nums, k):
    """Return the ``k`` most frequent values, least frequent of them first.

    Values with equal counts are ranked by value, the larger one counting as
    more frequent.
    """
    counts = Counter(nums)
    if not 0 <= k <= len(counts):
        raise ValueError(f"k must be between 0 and {len(counts)}, got {k}")
    ranked = heapq.nlargest(k, ((count, value) for value, count in counts.items()))
    return [value for _, value in reversed(ranked)]