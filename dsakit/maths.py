"""Number problems: digit palindromes, primality and 32-bit digit reversal."""

from math import isqrt

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def is_palindrome_number(x):
    """Return True if the decimal digits of ``x`` read the same both ways.

    Negative numbers are never palindromes.
    """
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def is_prime(n):
    """Return True if ``n`` is a prime number."""
    if n <= 1:
        return False
    return all(n % divisor for divisor in range(2, isqrt(n) + 1))


def count_primes(n):
    """Return how many prime numbers are strictly less than ``n``."""
    if n < 3:
        return 0
    sieve = bytearray([1]) * n
    sieve[0] = sieve[1] = 0
    for i in range(2, isqrt(n - 1) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, n, i)))
    return sum(sieve)


def reverse_integer(x):
    """Reverse the decimal digits of a 32-bit signed integer, keeping its sign.

    Returns 0 when the reversed value does not fit in 32 bits.
    """
    if not _INT_MIN <= x <= _INT_MAX:
        raise ValueError(f"{x} is not a 32-bit signed integer")
    reversed_abs = int(str(abs(x))[::-1])
    if reversed_abs > _INT_MAX:
        return 0
    return -reversed_abs if x < 0 else reversed_abs