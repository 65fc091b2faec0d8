# contestkit

A library of compact, tested solutions to classic competitive-programming
problems: arithmetic puzzles, number theory, array and grid problems, and
string processing. Every solution is a plain function that takes Python values
and returns Python values, so it can be reused, composed or tested directly.
The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `contestkit.arithmetic`: closed-form and small-loop problems on integers:
  `min_add_divide_operations`, `torch_trades`, `donut_shops`, `stair_moves`,
  `floor_number`, `isosceles_sides`, `ancient_computer_ops`, `lcm_pair`,
  `lucky_number`, `even_odd_winner`, `contest_midpoint` and `pizza_time`.
- `contestkit.sequences`: greedy and dynamic-programming problems on lists:
  `learnable_instruments`, `can_make_odd_sum`, `balanced_changes`,
  `earliest_dry_day`, `frog_min_cost`, `reaches_cell` and `red_blue_sequence`.
- `contestkit.strings`: checks on single short strings: `diverse_substring`,
  `can_twist_to_palindrome`, `reversible_substring`, `matches_shuffle_hash`
  and `fix_caps_lock`.
- `contestkit.number_theory`: divisibility, parity and xor problems:
  `good_index_pairs`, `button_presses`, `min_track_inconvenience`,
  `smallest_with_divisor_gap`, `is_fair`, `next_fair_number`, `xor_upto`,
  `shortest_mex_xor_array` and `is_sum_of_2020_2021`.
- `contestkit.arrays`: arrays and grids: `max_chocolates`, `place_buildings`,
  `max_grid_sum`, `recover_or_matrix`, `roof_permutation`,
  `max_rooms_visited`, `max_doubled_triangle_area`, `has_duplicate`,
  `count_at_least`, `count_greater` and `food_balance`.
- `contestkit.text`: text patterns, brackets and sliding windows:
  `distinct_erasure_results`, `fill_min_imperfectness`,
  `handkerchief_pattern`, `longest_common_substring`, `min_double_ended_ops`,
  `min_bracket_moves` and `min_recolors`.

## Example

```python
from contestkit.arithmetic import lucky_number, contest_midpoint
from contestkit.text import min_recolors

lucky_number(11)                    # "47"
contest_midpoint("10:00", "11:00")  # "10:30"
min_recolors("BBWBW", 3)            # 1
```

When a problem has no valid answer, the function returns the value documented
on it: `-1`, `None` or `False`. Invalid arguments, such as a non-positive
divisor or a malformed `hh:mm` time, raise `ValueError`.

## What it does not do

contestkit is a library only. It installs no command, and its functions read
no judge-style input from standard input and print nothing. Parsing test-case
input and formatting output are left to the caller.