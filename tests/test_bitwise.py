import pytest

from dsakit.bitwise import (
    count_set_bits,
    first_set_bit,
    longest_consecutive_ones,
    max_consecutive_ones,
    reverse_bits,
    rightmost_diff_bit,
    rightmost_set_bit,
    single_number,
    two_single_numbers,
)


@pytest.mark.parametrize("n, expected", [(1, 1), (12, 3), (18, 2), (64, 7)])
def test_first_set_bit_values(n, expected):
    assert first_set_bit(n) == expected


def test_first_set_bit_invariant():
    for n in range(1, 300):
        position = first_set_bit(n)
        assert position >= 1
        assert (n >> (position - 1)) & 1 == 1
        assert n & ((1 << (position - 1)) - 1) == 0


def test_first_set_bit_zero():
    assert first_set_bit(0) == 0


@pytest.mark.parametrize("length", range(1, 10))
@pytest.mark.parametrize("shift", [0, 1, 5])
def test_longest_consecutive_ones_single_run(length, shift):
    assert longest_consecutive_ones(((1 << length) - 1) << shift) == length


@pytest.mark.parametrize("longer, shorter", [(3, 1), (5, 2), (4, 3)])
def test_longest_consecutive_ones_two_runs(longer, shorter):
    n = (((1 << longer) - 1) << (shorter + 1)) | ((1 << shorter) - 1)
    assert longest_consecutive_ones(n) == longer
    n = (((1 << shorter) - 1) << (longer + 1)) | ((1 << longer) - 1)
    assert longest_consecutive_ones(n) == longer


def test_longest_consecutive_ones_zero():
    assert longest_consecutive_ones(0) == 0


def test_max_consecutive_ones():
    assert max_consecutive_ones([1, 1, 0, 1, 1, 1]) == 3


def test_max_consecutive_ones_none():
    assert max_consecutive_ones([]) == 0
    assert max_consecutive_ones([0, 0]) == 0


def test_count_set_bits_matches_binary_text():
    for n in range(0, 500):
        assert count_set_bits(n) == bin(n).count("1")


def test_count_set_bits_negative_is_zero():
    assert count_set_bits(-7) == 0


def test_reverse_bits_round_trip():
    for n in [0, 1, 2, 43261596, 2**32 - 1, 123456789]:
        assert reverse_bits(reverse_bits(n)) == n


def test_reverse_bits_lowest_to_highest():
    assert reverse_bits(1) == 1 << 31


def test_reverse_bits_example():
    assert reverse_bits(43261596) == 964176192


@pytest.mark.parametrize("n", [-1, 2**32])
def test_reverse_bits_out_of_range(n):
    with pytest.raises(ValueError):
        reverse_bits(n)


def test_rightmost_diff_bit_values():
    assert rightmost_diff_bit(11, 9) == 2
    assert rightmost_diff_bit(52, 4) == 5
    assert rightmost_diff_bit(7, 7) == -1


def test_rightmost_diff_bit_invariant():
    for m in range(0, 40):
        for n in range(0, 40):
            position = rightmost_diff_bit(m, n)
            if m == n:
                assert position == -1
            else:
                diff = m ^ n
                assert position >= 1
                assert (diff >> (position - 1)) & 1 == 1
                assert diff & ((1 << (position - 1)) - 1) == 0


def test_single_number():
    assert single_number([4, 1, 2, 1, 2]) == 4


@pytest.mark.parametrize("n, expected", [(1, 1), (6, 2), (12, 3), (40, 4)])
def test_rightmost_set_bit_values(n, expected):
    assert rightmost_set_bit(n) == expected


def test_rightmost_set_bit_invariant():
    for n in range(1, 200):
        position = rightmost_set_bit(n)
        assert position >= 1
        assert (n >> (position - 1)) & 1 == 1
        assert n & ((1 << (position - 1)) - 1) == 0


def test_rightmost_set_bit_rejects_zero():
    with pytest.raises(ValueError):
        rightmost_set_bit(0)


def test_two_single_numbers():
    result = two_single_numbers([1, 4, 2, 1, 3, 5, 6, 2, 3, 5])
    assert sorted(result) == [4, 6]


def test_two_single_numbers_order_by_distinguishing_bit():
    first, second = two_single_numbers([2, 1, 3, 2])
    assert (first, second) == (1, 3)
    mask = (first ^ second) & -(first ^ second)
    assert first & mask == 0
    assert second & mask == mask


def test_two_single_numbers_without_pair_raises():
    with pytest.raises(ValueError):
        two_single_numbers([2, 2])