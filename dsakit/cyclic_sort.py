"""Cyclic sort and the missing-number problems built on it."""


def _place_one_based(nums):
    size = len(nums)
    for value in nums:
        if not 1 <= value <= size:
            raise ValueError(f"{value} is outside the range 1..{size}")
    i = 0
    while i < size:
        j = nums[i] - 1
        if nums[i] != nums[j]:
            nums[i], nums[j] = nums[j], nums[i]
        else:
            i += 1


def cyclic_sort(nums):
    """Sort a list holding the numbers 1..n in place and return it."""
    _place_one_based(nums)
    return nums


def find_all_missing(nums):
    """Return, in ascending order, the numbers of 1..n absent from ``nums``.

    ``nums`` holds n values from 1..n, possibly repeated; it is reordered in place.
    """
    _place_one_based(nums)
    return [index for index, value in enumerate(nums, start=1) if value != index]


def find_missing_number(nums):
    """Return the one number of 0..n missing from a list of n distinct values."""
    size = len(nums)
    i = 0
    while i < size:
        j = nums[i]
        if 0 <= j < size and j != i and nums[j] != j:
            nums[i], nums[j] = nums[j], nums[i]
        else:
            i += 1
    return next((index for index, value in enumerate(nums) if value != index), size)