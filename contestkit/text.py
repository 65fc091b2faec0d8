"""Problems on strings, brackets and printed patterns."""

from __future__ import annotations


def distinct_erasure_results(text):
    """How many distinct strings arise by repeatedly erasing the first or second letter."""
    seen = set()
    total = 0
    for ch in text:
        seen.add(ch)
        total += len(seen)
    return total


def fill_min_imperfectness(pattern):
    """Fill each '?' with 'R' or 'B' so that as few neighbours as possible match."""
    cells = list(pattern)
    if cells and all(ch == "?" for ch in cells):
        cells[0] = "R"
    for i in range(1, len(cells)):
        if cells[i] == "?" and cells[i - 1] != "?":
            cells[i] = "B" if cells[i - 1] == "R" else "R"
    for i in range(len(cells) - 2, -1, -1):
        if cells[i] == "?" and cells[i + 1] != "?":
            cells[i] = "B" if cells[i + 1] == "R" else "R"
    return "".join(cells)


def _pattern_line(n, level):
    digits = [*range(level + 1), *range(level - 1, -1, -1)]
    return "  " * (n - level) + " ".join(map(str, digits))


def handkerchief_pattern(n):
    """Lines of the rhombus of digits from 0 up to ``n`` and back."""
    if n < 0:
        raise ValueError("n must be non-negative")
    levels = [*range(n + 1), *range(n - 1, -1, -1)]
    return [_pattern_line(n, level) for level in levels]


def longest_common_substring(a, b):
    """Length of the longest string occurring contiguously in both ``a`` and ``b``."""
    best = 0
    previous = [0] * (len(b) + 1)
    for ch_a in a:
        current = [0] * (len(b) + 1)
        for j, ch_b in enumerate(b, 1):
            if ch_a == ch_b:
                current[j] = previous[j - 1] + 1
                best = max(best, current[j])
        previous = current
    return best


def min_double_ended_ops(a, b):
    """Fewest end deletions from ``a`` and ``b`` that make them equal."""
    return len(a) + len(b) - 2 * longest_common_substring(a, b)


def min_bracket_moves(text):
    """Fewest brackets moved to an end to make a balanced sequence."""
    depth = 0
    moves = 0
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")":
            if depth:
                depth -= 1
            else:
                moves += 1
        else:
            raise ValueError(f"unexpected character {ch!r}")
    return moves


def min_recolors(blocks, k):
    """Fewest white cells to paint black to get ``k`` consecutive black cells."""
    if not 1 <= k <= len(blocks):
        raise ValueError("k must be between 1 and the number of blocks")
    whites = blocks[:k].count("W")
    best = whites
    for leaving, entering in zip(blocks, blocks[k:]):
        whites += (entering == "W") - (leaving == "W")
        best = min(best, whites)
    return best


__all__ = [
    "distinct_erasure_results",
    "fill_min_imperfectness",
    "handkerchief_pattern",
    "longest_common_substring",
    "min_double_ended_ops",
    "min_bracket_moves",
    "min_recolors",
]