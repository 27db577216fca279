import pytest

from dsakit.maths import count_primes, is_palindrome_number, is_prime, reverse_integer


@pytest.mark.parametrize("half", ["1", "12", "907", "4321"])
def test_constructed_palindromes_are_detected(half):
    assert is_palindrome_number(int(half + half[::-1]))
    assert is_palindrome_number(int(half + half[-2::-1]))


def test_zero_is_a_palindrome():
    assert is_palindrome_number(0) is True


@pytest.mark.parametrize("x", [-121, -1, 10, 1210, 123])
def test_non_palindromes(x):
    assert is_palindrome_number(x) is False


@pytest.mark.parametrize("n", [-5, 0, 1])
def test_small_numbers_are_not_prime(n):
    assert is_prime(n) is False


@pytest.mark.parametrize("a,b", [(2, 2), (3, 7), (11, 13), (97, 101)])
def test_products_are_not_prime(a, b):
    assert is_prime(a * b) is False


@pytest.mark.parametrize("p", [2, 3, 5, 97, 7919])
def test_known_primes(p):
    assert is_prime(p) is True


def test_count_primes_example():
    assert count_primes(10) == 4


@pytest.mark.parametrize("n", [-3, 0, 1, 2])
def test_count_primes_below_three_is_zero(n):
    assert count_primes(n) == 0


def test_count_primes_agrees_with_is_prime():
    for n in range(0, 200):
        assert count_primes(n) == sum(is_prime(k) for k in range(n))


@pytest.mark.parametrize("x", [1, 12, 123, 98765, 1234567891, 2147447412])
def test_reverse_integer_round_trip(x):
    assert reverse_integer(reverse_integer(x)) == x


@pytest.mark.parametrize("x", [7, 123, 908, 120])
def test_reverse_integer_keeps_sign(x):
    assert reverse_integer(-x) == -reverse_integer(x)


def test_reverse_integer_strips_trailing_zeros():
    assert reverse_integer(120) == reverse_integer(12)


@pytest.mark.parametrize("x", [1534236469, -(2**31), 2**31 - 1])
def test_reverse_integer_overflow_gives_zero(x):
    assert reverse_integer(x) == 0


def test_reverse_integer_rejects_wide_values():
    with pytest.raises(ValueError):
        reverse_integer(2**31)