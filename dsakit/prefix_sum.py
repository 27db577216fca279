"""Problems solved with running prefix sums and products."""

from itertools import accumulate
from operator import mul


def product_except_self(nums):
    """Return a list whose i-th item is the product of every item of ``nums`` except the i-th."""
    if not nums:
        return []
    left = accumulate(nums[:-1], mul, initial=1)
    right = list(accumulate(reversed(nums[1:]), mul, initial=1))
    return [lp * rp for lp, rp in zip(left, reversed(right))]


def left_right_difference(nums):
    """Return, for each position, |sum of items to the right - sum of items to the left|."""
    result = []
    left = 0
    right = sum(nums)
    for value in nums:
        right -= value
        result.append(abs(right - left))
        left += value
    return result


def find_middle_index(nums):
    """Return the first index whose left and right sums are equal, or -1."""
    total = sum(nums)
    left = 0
    for index, value in enumerate(nums):
        if left == total - left - value:
            return index
        left += value
    return -1