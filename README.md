# dsakit

A library of classic algorithm routines, grouped by technique. It depends only
on the standard library and supports Python 3.10 and later.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Modules

| Module | Functions |
| --- | --- |
| `dsakit.arrays` | `max_subarray_sum`, `merge_sorted`, `move_zeros_to_end`, `remove_duplicates`, `remove_element`, `second_largest`, `sort_colors`, `max_profit` |
| `dsakit.binary_search` | `find_min_rotated`, `is_perfect_square`, `search_rotated`, `search_rotated_with_duplicates`, `int_sqrt` |
| `dsakit.bitwise` | `first_set_bit`, `longest_consecutive_ones`, `max_consecutive_ones`, `count_set_bits`, `reverse_bits`, `rightmost_diff_bit`, `single_number`, `rightmost_set_bit`, `two_single_numbers` |
| `dsakit.hashing` | `largest_unique_number`, `longest_palindrome_length`, `max_balloons`, `first_unique_char`, `can_construct`, `two_sum_indices`, `has_pair_with_sum` |
| `dsakit.heap` | `kth_largest`, `kth_smallest`, `heap_sort`, `top_k_largest`, `top_k_frequent` |
| `dsakit.linked_list` | `ListNode`, `from_values`, `to_list`, `find_middle`, `middle_value`, `delete_node`, `remove_nth_from_end`, `find_cycle_start`, `has_cycle`, `intersection_point`, `kth_from_last`, `merge_sorted_lists`, `merge_sort`, `reverse_list`, `is_palindrome`, `reverse_sublist` |
| `dsakit.maths` | `is_palindrome_number`, `is_prime`, `count_primes`, `reverse_integer` |
| `dsakit.matrix` | `interchange_rows`, `reverse_columns`, `rotate`, `search_matrix`, `sum_triangles`, `transpose` |
| `dsakit.prefix_sum` | `product_except_self`, `left_right_difference`, `find_middle_index` |
| `dsakit.two_pointer` | `dutch_flag_sort`, `pair_with_target_sum`, `max_area`, `make_squares`, `search_triplets` |
| `dsakit.cyclic_sort` | `cyclic_sort`, `find_all_missing`, `find_missing_number` |
| `dsakit.stack` | `decimal_to_binary`, `next_greater_elements`, `remove_consecutive_duplicates`, `sort_stack`, `is_valid_parentheses` |
| `dsakit.strings` | `longest_palindromic_substring`, `count_palindromic_substrings`, `count_anagram_occurrences`, `length_of_last_word`, `longest_common_prefix`, `is_valid_palindrome`, `is_pangram`, `reverse_vowels`, `reverse_words`, `shortest_word_distance`, `are_rotations`, `is_anagram` |

## Examples

```python
from dsakit.arrays import max_subarray_sum
from dsakit.binary_search import search_rotated
from dsakit.strings import longest_palindromic_substring

max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
search_rotated([4, 5, 6, 7, 0, 1, 2], 0)            # 4
longest_palindromic_substring("babad")              # "bab"
```

Linked lists are built from plain Python lists and read back the same way.
`ListNode` has the attributes `val` and `next`, and nodes compare by identity:

```python
from dsakit.linked_list import from_values, reverse_list, to_list

head = from_values([1, 2, 3, 4])
to_list(reverse_list(head))   # [4, 3, 2, 1]
```

## Conventions

- Functions that rearrange a list in place, such as `sort_colors`,
  `move_zeros_to_end`, `merge_sorted`, `rotate` or `transpose`, change the list
  they are given. `heap_sort`, `cyclic_sort` and `dutch_flag_sort` sort in
  place and also return the list; `search_triplets` sorts its input in place.
- "Not found" results follow each function's docstring: for example
  `search_rotated` and `first_unique_char` return `-1`, `two_sum_indices`
  returns `[]` and `pair_with_target_sum` returns `[-1, -1]`.
- Inputs a function cannot work with raise `ValueError`: an empty sequence
  for `max_subarray_sum` or `second_largest`, `k` out of range in the heap
  functions, a value outside `1..n` for `cyclic_sort`, a non-square matrix for
  `rotate` or `transpose`, or a number outside 32 bits for `reverse_bits` and
  `reverse_integer`.

## Scope

dsakit is a library only: it has no command-line tool, and it reads and writes
no files.

## Running the tests

```
pytest
```