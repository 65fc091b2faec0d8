"""Divisibility, parity and xor problems on integers."""

from __future__ import annotations

from itertools import combinations
from math import gcd, isqrt


def good_index_pairs(values):
    """Most pairs i < j with gcd(a_i, 2 * a_j) > 1 over all orderings of ``values``.

    Placing even numbers first gives the best ordering.
    """
    ordered = sorted(values, key=lambda value: value & 1)
    return sum(1 for first, second in combinations(ordered, 2) if gcd(first, 2 * second) > 1)


def button_presses(n):
    """Worst-case presses to open a lock of ``n`` buttons by trial and error."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return n * (n - 1) * (n + 1) // 6 + n


def min_track_inconvenience(traffic):
    """Least sum of |a_i - a_j| over pairs after moving cars between sub-tracks."""
    if not traffic:
        raise ValueError("traffic must not be empty")
    count = len(traffic)
    remainder = sum(traffic) % count
    return remainder * (count - remainder)


def _is_prime(value):
    if value < 2:
        return False
    return all(value % divisor for divisor in range(2, isqrt(value) + 1))


def _next_prime(value):
    candidate = max(value, 2)
    while not _is_prime(candidate):
        candidate += 1
    return candidate


def smallest_with_divisor_gap(d):
    """Smallest number with at least four divisors, each two differing by at least ``d``."""
    if d < 1:
        raise ValueError("d must be positive")
    p = _next_prime(d + 1)
    q = _next_prime(p + d)
    return min(p * q, p ** 3)


def is_fair(n):
    """Whether ``n`` is divisible by each of its non-zero digits."""
    if n < 1:
        raise ValueError("n must be positive")
    return all(n % int(digit) == 0 for digit in set(str(n)) if digit != "0")


def next_fair_number(n):
    """Smallest fair number not less than ``n``."""
    candidate = n
    while not is_fair(candidate):
        candidate += 1
    return candidate


def xor_upto(n):
    """Xor of all integers from 0 to ``n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return (n, 1, n + 1, 0)[n % 4]


def shortest_mex_xor_array(mex, xor):
    """Length of the shortest array of non-negative integers with given MEX and xor."""
    if mex < 1:
        raise ValueError("mex must be positive")
    if xor < 0:
        raise ValueError("xor must be non-negative")
    prefix = xor_upto(mex - 1)
    if prefix == xor:
        return mex
    if prefix ^ xor != mex:
        return mex + 1
    return mex + 2


def is_sum_of_2020_2021(n):
    """Whether ``n`` is a sum of some 2020s and some 2021s."""
    if n < 0:
        raise ValueError("n must be non-negative")
    count, remainder = divmod(n, 2020)
    return count >= remainder


__all__ = [
    "good_index_pairs",
    "button_presses",
    "min_track_inconvenience",
    "smallest_with_divisor_gap",
    "is_fair",
    "next_fair_number",
    "xor_upto",
    "shortest_mex_xor_array",
    "is_sum_of_2020_2021",
]