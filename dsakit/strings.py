"""String problems: palindromes, anagrams, words and rotations."""

from collections import Counter
from itertools import islice

_VOWELS = frozenset("aeiouAEIOU")


def _expand(s, left, right):
    while left >= 0 and right < len(s) and s[left] == s[right]:
        yield left, right
        left -= 1
        right += 1


def longest_palindromic_substring(s):
    """Return the longest palindromic substring of ``s``; the earliest wins ties."""
    best_start, best_len = 0, 0
    for centre in range(len(s)):
        for left, right in (*_expand(s, centre, centre), *_expand(s, centre, centre + 1)):
            if right - left + 1 > best_len:
                best_start, best_len = left, right - left + 1
    return s[best_start : best_start + best_len]


def count_palindromic_substrings(s):
    """Return how many substrings of ``s``, counted by position, are palindromes."""
    return sum(
        sum(1 for _ in _expand(s, centre, centre)) + sum(1 for _ in _expand(s, centre, centre + 1))
        for centre in range(len(s))
    )


def count_anagram_occurrences(pat, txt):
    """Return how many windows of ``txt`` are anagrams of ``pat``."""
    size = len(pat)
    if size == 0 or len(txt) < size:
        return 0
    expected = Counter(pat)
    window = Counter(islice(txt, size))
    count = int(window == expected)
    for outgoing, incoming in zip(txt, txt[size:]):
        window[outgoing] -= 1
        window[incoming] += 1
        count += window == expected
    return count


def length_of_last_word(s):
    """Return the length of the last space-separated word of ``s``, or 0."""
    return len(s.rstrip(" ").split(" ")[-1])


def longest_common_prefix(strs):
    """Return the longest prefix shared by every string of ``strs``."""
    if not strs:
        raise ValueError("longest_common_prefix() requires at least one string")
    first, *rest = strs
    for index, ch in enumerate(first):
        if any(index >= len(other) or other[index] != ch for other in rest):
            return first[:index]
    return first


def is_valid_palindrome(s):
    """Return True if the ASCII letters and digits of ``s`` form a palindrome, ignoring case."""
    kept = [ch.lower() for ch in s if ch.isascii() and ch.isalnum()]
    return kept == kept[::-1]


def is_pangram(sentence):
    """Return True if ``sentence`` contains every letter of the English alphabet."""
    letters = {ch.lower() for ch in sentence if ch.isascii() and ch.isalpha()}
    return len(letters) == 26


def reverse_vowels(s):
    """Return ``s`` with its vowels in reverse order and every other character in place."""
    chars = list(s)
    positions = [index for index, ch in enumerate(chars) if ch in _VOWELS]
    for index, ch in zip(positions, reversed([chars[i] for i in positions])):
        chars[index] = ch
    return "".join(chars)


def reverse_words(s):
    """Return the space-separated words of ``s`` in reverse order, joined by single spaces."""
    return " ".join(reversed([word for word in s.split(" ") if word]))


def shortest_word_distance(words, word1, word2):
    """Return the smallest index distance between ``word1`` and ``word2`` in ``words``.

    Returns ``len(words)`` when one of them does not occur.
    """
    shortest = len(words)
    position1 = position2 = -1
    for index, word in enumerate(words):
        if word == word1:
            position1 = index
        elif word == word2:
            position2 = index
        if position1 != -1 and position2 != -1:
            shortest = min(shortest, abs(position1 - position2))
    return shortest


def are_rotations(s1, s2):
    """Return True if ``s2`` is a rotation of ``s1``."""
    return len(s1) == len(s2) and s2 in s1 + s1


def is_anagram(s, t):
    """Return True if ``t`` uses exactly the characters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)