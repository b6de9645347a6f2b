# leetcrust

A library of solutions to classic algorithm puzzles, grouped by theme into
plain Python modules. Each solution is an ordinary function, or for the
design problems a small class, that takes built-in Python values (ints,
strings, lists) and returns them. It has no dependencies outside the
standard library.

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

| Module | Contents |
| --- | --- |
| `leetcrust.tree` | `TreeNode`, `to_tree`, `tree`, `kth_largest_level_sum` |
| `leetcrust.graphs` | `find_circle_num`, `all_paths_source_target`, `eventual_safe_nodes`, `can_visit_all_rooms` |
| `leetcrust.intervals` | `min_groups`, `insert`, `binary_search`, `earliest_finish_time`, `mincost_tickets` |
| `leetcrust.grids` | `game_of_life`, `is_valid_sudoku`, `trap_rain_water`, `rotate`, `find_diagonal_order`, `sort_matrix`, `first_complete_index` |
| `leetcrust.strings` | `is_circular_sentence`, `min_changes`, `minimum_steps`, `count_prefix_suffix_pairs`, `compressed_string`, `minimum_length`, `calculate_score`, `resulting_string`, `can_construct`, `vowel_strings` |
| `leetcrust.design` | `TaskManager`, `Spreadsheet` |
| `leetcrust.words` | `group_anagrams`, `simplify_path`, `min_window`, `word_subsets`, `max_occur` |
| `leetcrust.geometry` | `number_of_pairs`, `trap`, `triangle_number`, `largest_triangle_area` |
| `leetcrust.bits` | `xor_all_nums`, `minimize_xor`, `find_the_prefix_common_array`, `does_valid_array_exist`, `make_the_integer_zero`, `can_sort_array`, `set_bits`, `min_operations` |
| `leetcrust.arrays` | `remove_duplicates`, `max_width_ramp` |
| `leetcrust.counting` | `max_kelements`, `area_of_max_diagonal`, `max_frequency_elements`, `length_of_lis`, `flower_game`, `find_closest`, `max_length`, `gcd_vec`, `lcm`, `gcd` |

## Examples

Binary trees are built from level-order entries. `to_tree` takes a list in
which `None` marks a missing child; `tree` takes the entries as arguments and
also accepts integer strings, treating anything else (such as `"null"`) as a
missing child:

```python
from leetcrust.tree import tree, to_tree, kth_largest_level_sum

root = tree(5, 8, 9, 2, 1, 3, 7, 4, 6)
kth_largest_level_sum(root, 2)   # 13

to_tree([1, 2, None, 3])         # root 1, left child 2, whose left child is 3
```

`game_of_life`, `rotate` and `remove_duplicates` change their argument in
place:

```python
from leetcrust.grids import rotate

matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
rotate(matrix)
matrix   # [[7, 4, 1], [8, 5, 2], [9, 6, 3]]
```

Design problems are classes:

```python
from leetcrust.design import Spreadsheet, TaskManager

sheet = Spreadsheet(3)
sheet.set_cell("A1", 10)
sheet.get_value("=A1+6")   # 16

tasks = TaskManager([[1, 101, 10], [2, 102, 20], [3, 103, 15]])
tasks.edit(102, 8)
tasks.exec_top()           # 3, the user owning task 103
```

## Errors

Invalid input raises an exception rather than returning a sentinel:

- `to_tree` raises `ValueError` when the root is missing or when children are
  listed for a node that does not exist.
- `TaskManager.edit` and `TaskManager.rmv` raise `KeyError` for an unknown
  task id.
- `Spreadsheet` raises `ValueError` for a malformed cell reference or a row
  outside `0..rows`.
- Several functions raise `ValueError` on empty input they cannot handle, and
  the letter-based string functions raise `ValueError` on characters other
  than lowercase `a` to `z`.

Where a puzzle defines a "not found" answer, the function returns it:
`kth_largest_level_sum`, `make_the_integer_zero` and `TaskManager.exec_top`
return `-1`, and `min_window` returns an empty string.

## What it does not do

This is a library only: it has no command-line tool, and it does not fetch
puzzle statements or generate test files.