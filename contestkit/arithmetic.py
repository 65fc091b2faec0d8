"""Closed-form and counting problems on integers."""

from __future__ import annotations

import re

_CLOCK = re.compile(r"\s*(\d{1,2}):(\d{1,2})\s*")


def min_add_divide_operations(a, b):
    """Fewest operations (``a //= b`` or ``b += 1``) needed to bring ``a`` to zero."""
    if a < 0:
        raise ValueError("a must be non-negative")
    if b < 1:
        raise ValueError("b must be positive")
    best = None
    for divisor in range(b + (b == 1), b + 31):
        ops = divisor - b
        value = a
        while value > 0:
            value //= divisor
            ops += 1
        best = ops if best is None else min(best, ops)
    return best


def torch_trades(x, y, k):
    """Trades needed to craft ``k`` torches.

    One trade turns a stick into ``x`` sticks, another turns ``y`` sticks
    into a coal; a torch takes one stick and one coal, and we start with a
    single stick.
    """
    if x < 2:
        raise ValueError("x must be at least 2")
    if y < 0 or k < 0:
        raise ValueError("y and k must be non-negative")
    needed = k * (y + 1) - 1
    return k + -(-needed // (x - 1))


def donut_shops(a, b, c):
    """Return a pair of donut counts where each shop is strictly cheaper, or -1.

    The first shop sells donuts at ``a`` each; the second sells boxes of
    ``b`` donuts for ``c``.
    """
    first = 1 if a < c else -1
    second = b if c < a * b else -1
    return first, second


def stair_moves(n, m):
    """Smallest multiple of ``m`` moves climbing ``n`` stairs by 1 or 2, or -1."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if m < 1:
        raise ValueError("m must be positive")
    fewest = n // 2 + n % 2
    rounded = -(-fewest // m) * m
    return rounded if rounded <= n else -1


def floor_number(n, x):
    """Floor of apartment ``n`` when the first floor has two flats and others ``x``."""
    if x < 1:
        raise ValueError("x must be positive")
    if n < 3:
        return 1
    return -(-(n - 2) // x) + 1


def isosceles_sides(a, b, c, d):
    """Pick sides x in [a, b], y in [b, c], z in [c, d] forming a triangle."""
    if not a <= b <= c <= d:
        raise ValueError("bounds must satisfy a <= b <= c <= d")
    return a, c, c


def _odd_part(value):
    while value % 2 == 0:
        value //= 2
    return value


def ancient_computer_ops(a, b):
    """Fewest shifts by 1, 2 or 3 bits turning ``a`` into ``b``, or -1."""
    if a < 1 or b < 1:
        raise ValueError("values must be positive")
    low, high = sorted((a, b))
    if _odd_part(low) != _odd_part(high):
        return -1
    ratio = high // low
    ops = 0
    while ratio >= 8:
        ratio //= 8
        ops += 1
    if ratio > 1:
        ops += 1
    return ops


def lcm_pair(l, r):
    """Two numbers in [l, r] with lcm also in [l, r], or None if impossible."""
    if 2 * l > r:
        return None
    return l, 2 * l


def lucky_number(n):
    """Smallest number of digits 4 and 7 whose digit sum is ``n``, or None."""
    fours = 0
    while n % 7 != 0:
        n -= 4
        fours += 1
        if n < 4:
            break
    if n % 7 != 0:
        return None
    return "4" * fours + "7" * (n // 7)


def even_odd_winner(n):
    """Winner of the even-odd game starting from ``n``.

    Mahmoud moves first and must subtract an even number; with an odd ``n``
    he can never take everything, so Ehab wins.
    """
    if n < 1:
        raise ValueError("n must be positive")
    mahmoud_takes_all = n % 2 == 0
    return "Mahmoud" if mahmoud_takes_all else "Ehab"


def _parse_clock(text):
    match = _CLOCK.fullmatch(text)
    if match is None:
        raise ValueError(f"not a time of the form hh:mm: {text!r}")
    hours, minutes = map(int, match.groups())
    return hours * 60 + minutes


def contest_midpoint(start, end):
    """Midpoint of a contest given its start and end as ``hh:mm``."""
    middle = (_parse_clock(start) + _parse_clock(end)) // 2
    hours, minutes = divmod(middle, 60)
    return f"{hours:02d}:{minutes:02d}"


def pizza_time(n):
    """Minutes needed to bake at least ``n`` slices."""
    return max(6, n + 1) // 2 * 5


__all__ = [
    "min_add_divide_operations",
    "torch_trades",
    "donut_shops",
    "stair_moves",
    "floor_number",
    "isosceles_sides",
    "ancient_computer_ops",
    "lcm_pair",
    "lucky_number",
    "even_odd_winner",
    "contest_midpoint",
    "pizza_time",
]