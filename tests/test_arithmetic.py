import math

import pytest

from contestkit.arithmetic import (
    ancient_computer_ops,
    contest_midpoint,
    donut_shops,
    even_odd_winner,
    floor_number,
    isosceles_sides,
    lcm_pair,
    lucky_number,
    min_add_divide_operations,
    pizza_time,
    stair_moves,
    torch_trades,
)


def test_add_divide_worked_example():
    assert min_add_divide_operations(9, 2) == 4


@pytest.mark.parametrize("b", [1, 2, 3, 7])
def test_add_divide_nondecreasing_in_a(b):
    results = [min_add_divide_operations(a, b) for a in range(1, 200)]
    assert results == sorted(results)


def test_add_divide_same_for_all_a_below_b():
    assert len({min_add_divide_operations(a, 10) for a in range(1, 10)}) == 1


def test_add_divide_rejects_zero_divisor():
    with pytest.raises(ValueError):
        min_add_divide_operations(5, 0)


@pytest.mark.parametrize("x,y,k", [(2, 1, 5), (42, 13, 24), (12, 11, 12), (1000000000, 1000000000, 1000000000), (2, 1000000000, 1000000000)])
def test_torch_trades_is_minimal(x, y, k):
    trades = torch_trades(x, y, k)
    stick_trades = trades - k
    needed_sticks = k * (y + 1)
    assert 1 + stick_trades * (x - 1) >= needed_sticks
    assert 1 + (stick_trades - 1) * (x - 1) < needed_sticks


def test_torch_trades_rejects_unit_exchange():
    with pytest.raises(ValueError):
        torch_trades(1, 3, 3)


def test_donut_shops_pairs():
    assert donut_shops(5, 10, 4) == (-1, 10)
    assert donut_shops(4, 5, 20) == (1, -1)


def test_stair_moves_impossible():
    assert stair_moves(3, 5) == -1


@pytest.mark.parametrize("m", range(1, 11))
def test_stair_moves_properties(m):
    for n in range(0, 40):
        result = stair_moves(n, m)
        least = (n + 1) // 2
        if result == -1:
            assert all(moves % m for moves in range(least, n + 1))
        else:
            assert result % m == 0
            assert least <= result <= n
            assert result - m < least


@pytest.mark.parametrize("x", [1, 2, 3, 5, 7])
def test_floor_number_contains_apartment(x):
    for n in range(1, 100):
        floor = floor_number(n, x)
        if floor == 1:
            assert n <= 2
        else:
            assert 3 + (floor - 2) * x <= n <= 2 + (floor - 1) * x


@pytest.mark.parametrize("a,b,c,d", [(1, 3, 5, 7), (1, 5, 5, 7), (100000, 200000, 300000, 400000), (1, 1, 977539810, 977539810)])
def test_isosceles_sides_form_triangle(a, b, c, d):
    x, y, z = isosceles_sides(a, b, c, d)
    assert a <= x <= b and b <= y <= c and c <= z <= d
    assert x + y > z and y + z > x and x + z > y


def test_isosceles_sides_rejects_unordered():
    with pytest.raises(ValueError):
        isosceles_sides(5, 3, 2, 1)


def test_ancient_computer_example():
    assert ancient_computer_ops(96, 3) == 2


def test_ancient_computer_unreachable():
    assert ancient_computer_ops(3, 5) == -1


@pytest.mark.parametrize("a,b", [(96, 3), (11, 88), (1, 1024), (7, 7)])
def test_ancient_computer_symmetric(a, b):
    assert ancient_computer_ops(a, b) == ancient_computer_ops(b, a)


def test_ancient_computer_rejects_zero():
    with pytest.raises(ValueError):
        ancient_computer_ops(0, 4)


@pytest.mark.parametrize("l,r", [(1, 1337), (13, 69), (2, 4), (88, 176)])
def test_lcm_pair_in_range(l, r):
    x, y = lcm_pair(l, r)
    assert l <= x < y <= r
    assert l <= math.lcm(x, y) <= r


def test_lcm_pair_impossible():
    assert lcm_pair(88, 89) is None


def test_lucky_number_properties():
    for n in range(1, 80):
        result = lucky_number(n)
        if result is None:
            assert all((n - 7 * sevens) % 4 for sevens in range(n // 7 + 1))
        else:
            assert set(result) <= {"4", "7"}
            assert sum(map(int, result)) == n
            assert result == "".join(sorted(result))


def test_even_odd_winner():
    assert even_odd_winner(1) == "Ehab"
    assert even_odd_winner(2) == "Mahmoud"


def test_contest_midpoint_example():
    assert contest_midpoint("10:00", "11:00") == "10:30"


def test_contest_midpoint_same_time():
    assert contest_midpoint("01:02", "01:02") == "01:02"


def test_contest_midpoint_bad_format():
    with pytest.raises(ValueError):
        contest_midpoint("1000", "11:00")