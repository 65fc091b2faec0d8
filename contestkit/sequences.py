"""Greedy and dynamic-programming problems on integer sequences."""

from __future__ import annotations


def learnable_instruments(days, costs):
    """1-based indices of instruments learned greedily, cheapest first."""
    order = sorted(range(1, len(costs) + 1), key=lambda index: costs[index - 1])
    chosen = []
    remaining = days
    for index in order:
        cost = costs[index - 1]
        if remaining <= 0 or cost > remaining:
            break
        chosen.append(index)
        remaining -= cost
    return chosen


def can_make_odd_sum(values):
    """Whether copying elements onto one another can make the sum odd."""
    odd = sum(1 for value in values if value & 1)
    even = len(values) - odd
    return sum(values) % 2 == 1 or (odd > 0 and even > 0)


def _half_toward_zero(value):
    return value // 2 if value >= 0 else -((-value) // 2)


def balanced_changes(changes):
    """Halve every change, rounding odd ones so that the total stays balanced."""
    surplus = sum(_half_toward_zero(value) for value in changes)
    result = []
    for value in changes:
        if surplus > 0 and value < 0 and value % 2:
            result.append((value - 1) // 2)
            surplus -= 1
        elif surplus < 0 and value > 0 and value % 2:
            result.append((value + 1) // 2)
            surplus += 1
        else:
            result.append(_half_toward_zero(value))
    return result


def earliest_dry_day(rain, before, after):
    """First 1-based day drier than ``before`` days before and ``after`` after."""
    if before < 0 or after < 0:
        raise ValueError("window sizes must be non-negative")
    for day, amount in enumerate(rain):
        window = rain[max(day - before, 0): day + after + 1]
        if min(window) == amount:
            return day + 1
    return None


def frog_min_cost(heights):
    """Least total cost for a frog jumping one or two stones to the last one."""
    if not heights:
        raise ValueError("heights must not be empty")
    two_back = one_back = 0
    for i in range(1, len(heights)):
        cost = one_back + abs(heights[i] - heights[i - 1])
        if i > 1:
            cost = min(cost, two_back + abs(heights[i] - heights[i - 2]))
        two_back, one_back = one_back, cost
    return one_back


def reaches_cell(jumps, target):
    """Whether portals starting from cell 1 lead to the 1-based ``target`` cell."""
    if any(jump < 1 for jump in jumps):
        raise ValueError("every jump must be at least 1")
    steps = [*jumps, 1]
    cell = 1
    while cell <= len(steps):
        if cell == target:
            return True
        cell += steps[cell - 1]
    return False


def red_blue_sequence(red, blue):
    """Arrange red wins around blue ones so that the longest red run is shortest."""
    if red < 0 or blue < 0:
        raise ValueError("counts must be non-negative")
    cap, extra = divmod(red, blue + 1)
    runs = ["R" * (cap + 1)] * extra + ["R" * cap] * (blue - extra) + ["R" * cap]
    return "B".join(runs)


__all__ = [
    "learnable_instruments",
    "can_make_odd_sum",
    "balanced_changes",
    "earliest_dry_day",
    "frog_min_cost",
    "reaches_cell",
    "red_blue_sequence",
]