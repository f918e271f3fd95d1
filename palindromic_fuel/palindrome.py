"""
Palindrome predicates and generation of palindromic integers by digit length.
"""

from typing import Iterator, List


def digit_count(n: int) -> int:
    """
    Returns the number of decimal digits of n (n >= 0). Zero has one digit.
    """
    count = 1
    while n >= 10:
        n //= 10
        count += 1
    return count


def is_palindrome(n: int) -> bool:
    """
    Returns True if n is a decimal palindrome (numeric half-reversal).
    Negative numbers are never palindromes.
    """
    if n < 0:
        return False
    if n < 10:
        return True

    # Non-zero numbers ending in 0 cannot be palindromes.
    if n % 10 == 0:
        return False

    # Even-length palindromes must be divisible by 11.
    if digit_count(n) % 2 == 0 and n % 11 != 0:
        return False

    # Half-reverse
    m = n
    rev = 0
    while m > rev:
        rev = rev * 10 + m % 10
        m //= 10

    return m == rev or m == rev // 10


def is_string_palindrome(s: str) -> bool:
    """
    Returns True if s reads the same in both directions.
    Characters are compared positionally with no normalisation, so
    "a b a" and "50.05" are palindromes while "32.14" is not.
    """
    i, j = 0, len(s) - 1
    while i < j:
        if s[i] != s[j]:
            return False
        i += 1
        j -= 1
    return True


def _mirror(seed: int, odd: bool) -> int:
    """
    Appends the reversed digits of seed to seed. For odd lengths the last
    digit of seed is the centre and is not repeated.
    """
    result = seed
    m = seed // 10 if odd else seed
    while m > 0:
        result = result * 10 + m % 10
        m //= 10
    return result


def generate_for_length(digits: int) -> List[int]:
    """
    Returns every palindrome with exactly `digits` decimal digits, ascending.
    Algorithm:
      - 1 digit: 1..9; 2 digits: 11, 22, ..., 99.
      - Otherwise take every seed with half = ceil(digits / 2) digits and no
        leading zero, and mirror it. The seed fixes the whole numeral, so
        ascending seeds give ascending palindromes with no duplicates.
    There are 9 * 10**(half - 1) of them.
    """
    return list(iter_length(digits))


def iter_length(digits: int, start: int = 0) -> Iterator[int]:
    """
    Lazily yields the palindromes of generate_for_length, ascending.
    When start has `digits` digits, seeds below its leading half are skipped,
    since every palindrome they mirror into is smaller than start. Values
    below start may still be yielded.
    """
    if digits < 1:
        return
    if digits <= 2:
        yield from range(1, 10) if digits == 1 else range(11, 100, 11)
        return

    half = (digits + 1) // 2
    odd = digits % 2 == 1
    first = 10 ** (half - 1)
    if digit_count(start) == digits:
        first = start // 10 ** (digits - half)
    for seed in range(first, 10 ** half):
        yield _mirror(seed, odd)


def collect_in_range(lo: int, hi: int) -> List[int]:
    """
    Collects the palindromes in [lo..hi] in ascending order.
    Each digit length between lo and hi is generated lazily in turn,
    starting from the leading half of lo; since a length is emitted in
    ascending order its scan stops at the first value above hi.
    """
    if lo > hi:
        return []

    palindromes = []
    for digits in range(digit_count(max(lo, 0)), digit_count(max(hi, 0)) + 1):
        for value in iter_length(digits, max(lo, 0)):
            if value > hi:
                break
            if value >= lo:
                palindromes.append(value)

    return palindromes
