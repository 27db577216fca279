"""Bit manipulation problems."""

from functools import reduce
from operator import xor

_WORD_BITS = 32
_WORD_MASK = (1 << _WORD_BITS) - 1


def first_set_bit(n):
    """Return the 1-based position of the lowest set bit of ``n``, or 0 when ``n`` is 0."""
    return (n & -n).bit_length()


def longest_consecutive_ones(n):
    """Return the length of the longest run of 1 bits in ``n`` as a 32-bit word."""
    n &= _WORD_MASK
    count = 0
    while n:
        count += 1
        n &= n << 1
    return count


def max_consecutive_ones(nums):
    """Return the length of the longest run of non-zero items in ``nums``."""
    best = run = 0
    for value in nums:
        run = run + 1 if value != 0 else 0
        best = max(best, run)
    return best


def count_set_bits(n):
    """Return the number of 1 bits in ``n``; non-positive values give 0."""
    return n.bit_count() if n > 0 else 0


def reverse_bits(n):
    """Return the 32-bit unsigned integer ``n`` with its bits in reverse order."""
    if not 0 <= n <= _WORD_MASK:
        raise ValueError(f"{n} is not a 32-bit unsigned integer")
    return int(f"{n:032b}"[::-1], 2)


def rightmost_diff_bit(m, n):
    """Return the 1-based position of the lowest bit where ``m`` and ``n`` differ, or -1."""
    diff = m ^ n
    return first_set_bit(diff) if diff else -1


def single_number(arr):
    """Return the one value that appears an odd number of times when all others pair up."""
    return reduce(xor, arr, 0)


def rightmost_set_bit(num):
    """Return the 1-based position of the lowest set bit of a positive ``num``."""
    if num <= 0:
        raise ValueError("rightmost_set_bit() requires a positive integer")
    return first_set_bit(num)


def two_single_numbers(nums):
    """Return the two values that appear once when every other value appears twice.

    The value whose distinguishing bit is clear comes first.
    """
    combined = single_number(nums)
    if combined == 0:
        raise ValueError("input does not hold two distinct unpaired values")
    mask = combined & -combined
    with_bit = single_number(x for x in nums if x & mask)
    without_bit = single_number(x for x in nums if not x & mask)
    return [without_bit, with_bit]