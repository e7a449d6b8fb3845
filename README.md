# dsakit

A small library of classic data-structure and algorithm routines in plain Python, with no
dependencies beyond the standard library.

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
| `dsakit.linked_lists` | `SinglyLinkedList`, `DoublyLinkedList`, `CircularLinkedList` |
| `dsakit.list_problems` | `ListNode`, `build_list`, `list_values`, `has_cycle`, `detect_cycle`, `reverse_list`, `pair_sum`, `middle_node` |
| `dsakit.trees` | `TreeNode`, `build_tree`, `level_order`, `max_depth` |
| `dsakit.hashing` | `two_sum`, `longest_consecutive`, `contains_duplicate`, `is_anagram`, `word_pattern`, `top_k_frequent`, `is_valid_sudoku`, `group_anagrams`, `subarray_sum`, `check_subarray_sum`, `num_odd_sum_subarrays`, `find_middle_index`, `pivot_index` |
| `dsakit.two_pointers` | `max_area`, `number_of_nice_subarrays`, `two_sum_sorted`, `four_sum`, `min_subarray_len`, `maximum_subarray_sum`, `remove_duplicates`, `move_zeroes`, `find_duplicate`, `length_of_longest_substring`, `find_max_average`, `merge_sorted`, `is_palindrome` |
| `dsakit.searching` | `binary_search`, `search_rotated`, `search_rotated_with_duplicates`, `search_matrix`, `find_peak_element`, `peak_index_in_mountain` |
| `dsakit.stacks_queues` | `StackQueue`, `CircularQueue`, `is_valid_parentheses`, `decode_string`, `next_greater_element`, `simplify_path`, `daily_temperatures` |
| `dsakit.intervals` | `merge_intervals`, `insert_interval`, `check_valid_cuts`, `car_pooling` |
| `dsakit.recursion` | `generate_parenthesis`, `kth_grammar`, `letter_case_permutation`, `num_squares`, `digit_square_sum`, `is_happy` |

## Examples

Linked lists can be built from any iterable, support `len()` and are iterable:

```python
from dsakit.linked_lists import SinglyLinkedList, DoublyLinkedList

lst = SinglyLinkedList()
for value in (57, 1, 2, 3):
    lst.push_front(value)
list(lst)      # [3, 2, 1, 57]
lst.reverse()
list(lst)      # [57, 1, 2, 3]

dll = DoublyLinkedList([1, 2, 3])
dll.insert_at(2, 100)
list(reversed(dll))  # [3, 2, 100, 1]
```

Positions given to `insert_at` are 1-based. `SinglyLinkedList.insert_after` and
`insert_before` raise `ValueError` when the list is empty or the key is missing, and
`SinglyLinkedList.insert_at` raises `IndexError` for a position past the end. The doubly
linked and circular lists append instead when the position is past the end.

Array and string routines take ordinary Python lists and strings:

```python
from dsakit.hashing import two_sum
from dsakit.searching import search_rotated
from dsakit.stacks_queues import decode_string, simplify_path
from dsakit.intervals import merge_intervals

two_sum([2, 7, 11, 15], 9)                    # (0, 1)
search_rotated([4, 5, 6, 7, 0, 1, 2], 0)      # 4
decode_string("3[a2[c]]")                     # "accaccacc"
simplify_path("/a/./b/../../c/")              # "/c"
merge_intervals([[1, 3], [2, 6], [8, 10]])    # [[1, 6], [8, 10]]
```

`two_sum` and `two_sum_sorted` return a tuple of indices and raise `ValueError` when no
pair adds up to the target. Routines that work in place, such as `move_zeroes`,
`remove_duplicates` and `merge_sorted`, change the list passed to them.

Queues are ordinary objects:

```python
from dsakit.stacks_queues import CircularQueue, StackQueue

q = CircularQueue(2)
q.enqueue(1)   # True
q.enqueue(2)   # True
q.enqueue(3)   # False, the queue is full
q.is_full()    # True
q.front()      # 1
q.rear()       # 2

sq = StackQueue()
sq.push("a")
sq.push("b")
sq.pop()       # "a"
len(sq)        # 1
```

`CircularQueue.front` and `rear`, and `StackQueue.pop` and `peek`, raise `IndexError` on an
empty queue.

Linked-list and tree problems come with helpers for building inputs:

```python
from dsakit.list_problems import build_list, list_values, reverse_list, pair_sum
from dsakit.trees import build_tree, level_order, max_depth

list_values(reverse_list(build_list([1, 2, 3])))        # [3, 2, 1]
pair_sum(build_list([5, 4, 2, 1]))                       # 6
level_order(build_tree([3, 9, 20, None, None, 15, 7]))   # [[3], [9, 20], [15, 7]]
max_depth(build_tree([3, 9, 20, None, None, 15, 7]))     # 3
```

## What it does not do

`dsakit` is a library only: it has no command-line program and reads or writes no files.
The linked-list classes print nothing; use `list(...)` to see their contents.