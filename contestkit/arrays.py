"""Greedy, counting and grid problems on arrays."""

from __future__ import annotations

from bisect import bisect_left, bisect_right


def max_chocolates(limits):
    """Most chocolates bought when each type's count exceeds all earlier ones."""
    if not limits:
        raise ValueError("limits must not be empty")
    total = current = limits[-1]
    for limit in reversed(limits[:-1]):
        current = min(current - 1, limit)
        total += max(current, 0)
    return total


def place_buildings(visits):
    """Place buildings on a line around a headquarters at 0 to minimise walking.

    Returns the total walking time and the coordinates, the headquarters first.
    """
    order = sorted(((count, index) for index, count in enumerate(visits)), reverse=True)
    coords = [0] * len(visits)
    total = 0
    for rank, (count, index) in enumerate(order):
        distance = rank // 2 + 1
        coords[index] = distance if rank % 2 == 0 else -distance
        total += 2 * distance * count
    return total, [0, *coords]


def max_grid_sum(grid):
    """Largest sum after flipping signs of adjacent cell pairs any number of times."""
    cells = [value for row in grid for value in row]
    if not cells:
        raise ValueError("grid must not be empty")
    negatives = sum(1 for value in cells if value < 0)
    total = sum(abs(value) for value in cells)
    if negatives % 2:
        return total - 2 * min(abs(value) for value in cells)
    return total


def recover_or_matrix(matrix):
    """A 0/1 matrix whose row-or-column OR gives ``matrix``, or None if none exists."""
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        raise ValueError("matrix must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("matrix rows must have equal length")
    if any(value not in (0, 1) for row in rows for value in row):
        raise ValueError("matrix entries must be 0 or 1")

    full_rows = [all(row) for row in rows]
    full_cols = [all(column) for column in zip(*rows)]
    candidate = [[int(r and c) for c in full_cols] for r in full_rows]

    row_any = [any(row) for row in candidate]
    col_any = [any(column) for column in zip(*candidate)]
    rebuilt = [[int(r or c) for c in col_any] for r in row_any]
    return candidate if rebuilt == rows else None


def roof_permutation(n):
    """Permutation of 0..n-1 whose largest adjacent xor is as small as possible."""
    if n < 1:
        raise ValueError("n must be positive")
    top = 1 << max((n - 1).bit_length() - 1, 0)
    return [*range(top - 1, -1, -1), *range(top, n)]


def max_rooms_visited(stairs):
    """Most rooms visited on a two-floor house given where staircases stand."""
    length = len(stairs)
    first = stairs.find("1")
    if first == -1:
        return length
    last = stairs.rfind("1")
    return max(length, 2 * max(length - first, last + 1))


def max_doubled_triangle_area(width, height, sides):
    """Twice the largest triangle area with two vertices on one side of a rectangle.

    ``sides`` holds four sorted coordinate lists: the bottom and top sides
    (measured along the width) and then the left and right ones.
    """
    if len(sides) != 4:
        raise ValueError("exactly four sides are required")
    best = 0
    for position, points in enumerate(sides):
        span = points[-1] - points[0] if points else 0
        best = max(best, span * (height if position < 2 else width))
    return best


def has_duplicate(values):
    """Whether any value occurs twice."""
    return len(set(values)) < len(values)


def count_at_least(values, x):
    """How many values are at least ``x``."""
    ordered = sorted(values)
    return len(ordered) - bisect_left(ordered, x)


def count_greater(values, x):
    """How many values are strictly greater than ``x``."""
    ordered = sorted(values)
    return len(ordered) - bisect_right(ordered, x)


def food_balance(f1, p1, f2, p2):
    """Which of two meals is more balanced: "First", "Second" or "Both"."""
    first = abs(f1 - p1)
    second = abs(f2 - p2)
    if first == second:
        return "Both"
    return "First" if first < second else "Second"


__all__ = [
    "max_chocolates",
    "place_buildings",
    "max_grid_sum",
    "recover_or_matrix",
    "roof_permutation",
    "max_rooms_visited",
    "max_doubled_triangle_area",
    "has_duplicate",
    "count_at_least",
    "count_greater",
    "food_balance",
]