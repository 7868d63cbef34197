# algonotes

A plain-Python collection of classic algorithms and data structures. Everything
is written with the standard library only, so the package has no runtime
dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algonotes.combinatorics` | `balanced_parentheses`, `binomial`, `catalan`, `permutations_of_string`, `permutations_of`, `stair_jumps`, `keypad_combinations`, `factorial_digits` |
| `algonotes.arrays` | `three_sum_zero`, `has_duplicates`, `beauty_verdict`, `replace_with_greatest_on_right`, `find_peak`, `equilibrium_point`, `max_subarray`, `next_greater_elements`, `subarray_with_sum`, `merge_k_sorted`, `transpose`, `sort_rows`, `max_histogram_area`, `max_rectangle_in_binary_matrix`, `longest_consecutive` |
| `algonotes.sequences` | `longest_repeating_subsequence`, `count_subsets_with_sum`, `longest_increasing_subsequence`, `count_anagram_occurrences` |
| `algonotes.linked_list` | `ListNode`, `SinglyLinkedList` (with `push_front`, `append`, `middle`, `insertion_sort`, `render`), `merge_sorted`, `intersection_value` |
| `algonotes.doubly_linked_list` | `DoublyNode`, `DoublyLinkedList` (1-based `node_at`, `insert_at`, `insert_after`, `remove_first`, `remove_at`, `remove_last`, in-place `reverse`, `render`) |
| `algonotes.trees` | `BinaryNode`, `TreeNode`, `bst_insert`, `bst_from`, `bst_min`, `mirror`, `inorder`, `lowest_common_ancestor`, `tree_from_level_order`, `next_larger` |
| `algonotes.graphs` | `Edge`, `Graph`, `is_bipartite`, `dijkstra`, `kruskal`, `prim_parents`, `prim_parents_heap`, `prim_matrix`, `topological_sort_matrix`, `rat_in_maze` |
| `algonotes.calculator` | `Calculator`, a keypad-style calculator with digits, a decimal point, `+ - * /`, sign toggle, backspace, clear and clear-entry; `main` for the command line |
| `algonotes.misc` | `Student`, `best_two_average`, `describe_students`, `even_number_pattern`, `ordered_map_demo` |

## Examples

```python
from algonotes.combinatorics import balanced_parentheses, catalan
from algonotes.sequences import longest_increasing_subsequence
from algonotes.linked_list import SinglyLinkedList, merge_sorted

print(balanced_parentheses(3))
print(catalan(5))
print(longest_increasing_subsequence([10, 22, 9, 33, 21, 50, 41, 60]))

first = SinglyLinkedList([1, 4, 6, 8])
second = SinglyLinkedList([2, 3, 5, 7, 9])
merged = merge_sorted(first, second)   # relinks the nodes; first and second end up empty
print(merged.render())                 # 1 2 3 4 5 6 7 8 9
```

The calculator can be driven from code one key at a time:

```python
from algonotes.calculator import Calculator

calc = Calculator()
for key in "12+30=":
    calc.press(key)
print(calc.display)  # 42
```

## Command line

The calculator is also available as a command:

```
algonotes-calc 12+30=
```

Each argument is split into single-character keys, except `CE` (clear entry),
`BS` (backspace) and `PM` (sign toggle), which are whole keys. The final display
is printed. Run without arguments, the command reads keys line by line from
standard input and prints the display after each line.

## What it does not do

The package has no module of array sorting routines (bubble, insertion, heap,
quick sort and the like); use Python's built-in `sorted` and `list.sort`. The
only in-place sort it offers is `SinglyLinkedList.insertion_sort`. The calculator
is a text-driven model with no graphical window.