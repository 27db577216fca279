"""Counting and lookup problems solved with hash maps and sets."""

from collections import Counter


def largest_unique_number(nums):
    """Return the largest value appearing exactly once, never less than -1."""
    counts = Counter(nums)
    return max([-1, *(value for value, count in counts.items() if count == 1)])


def longest_palindrome_length(s):
    """Return the length of the longest palindrome that can be built from the letters of ``s``."""
    length = 0
    found_odd = False
    for count in Counter(s).values():
        length += count - count % 2
        found_odd = found_odd or count % 2 == 1
    return length + found_odd


def max_balloons(text):
    """Return how many times the word "balloon" can be spelled from the letters of ``text``."""
    counts = Counter(text)
    return min(counts["b"], counts["a"], counts["l"] // 2, counts["o"] // 2, counts["n"])


def first_unique_char(s):
    """Return the index of the first character that occurs once in ``s``, or -1."""
    counts = Counter(s)
    return next((index for index, ch in enumerate(s) if counts[ch] == 1), -1)


def can_construct(ransom_note, magazine):
    """Return True if ``ransom_note`` can be spelled with the letters of ``magazine``."""
    return not Counter(ransom_note) - Counter(magazine)


def two_sum_indices(nums, target):
    """Return ``[i, j]`` with ``j < i`` and ``nums[i] + nums[j] == target``, or ``[]``."""
    seen = {}
    for index, value in enumerate(nums):
        partner = target - value
        if partner in seen:
            return [index, seen[partner]]
        seen[value] = index
    return []


def has_pair_with_sum(arr, target):
    """Return True if two items of ``arr`` at different positions sum to ``target``."""
    seen = set()
    for value in arr:
        if target - value in seen:
            return True
        seen.add(value)
    return False