# puzzlekit

A collection of worked solutions to well-known algorithm puzzles, written as
plain Python functions you can import, read and experiment with. Nothing
outside the standard library is needed.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `puzzlekit.counting` | counting and tallying: `difference_of_sum`, `edge_score`, `find_judge`, `find_missing_and_repeated_values`, `max_div_score`, `number_of_pairs`, `discount_prices`, `convert_date_to_binary`, `find_maximum_score`, `get_sneaky_numbers` |
| `puzzlekit.greedy` | greedy and two-pointer strategies: `can_complete_circuit`, `get_winner`, `max_num_of_marked_indices`, `max_profit_assignment`, `max_score_sightseeing_pair`, `maximum_subsequence_count`, `min_operations`, `min_refuel_stops`, `minimum_refill`, `minimum_rounds`, `number_of_weeks`, `smallest_range_ii`, `missing_rolls`, `garbage_collection` |
| `puzzlekit.searching` | binary search on the answer: `min_speed_on_time`, `minimum_time`, `max_possible_score` |
| `puzzlekit.structures` | a linked list node and a seat reservation heap: `ListNode`, `merge_nodes`, `SeatManager` |
| `puzzlekit.dynamic` | dynamic programming and memoised search: `count_quadruplets`, `count_quadruplets_fast`, `count_special_numbers`, `mincost_tickets`, `number_of_permutations`, `max_operations`, `max_score`, `min_valid_strings` |
| `puzzlekit.graphs` | shortest paths and breadth-first search: `min_cost`, `num_buses_to_destination`, `oranges_rotting` |
| `puzzlekit.windows` | prefix XOR, heaps and sliding windows: `kth_largest_value`, `latest_time_catch_the_bus`, `longest_awesome`, `longest_equal_subarray`, `maximize_win`, `most_competitive`, `take_characters` |
| `puzzlekit.ccf` | three judge-style problems: `repeated_position_counts`, `attention`, `decompress`, with text front ends `solve_repeated`, `solve_attention`, `solve_decompress` and the command-line entry `main` |

Functions return `-1` where the puzzle defines "no answer" that way. Inputs
that a function cannot work with at all (for example an empty matrix for
`kth_largest_value`, or `a` not holding exactly four values for `max_score`)
raise `ValueError`; `SeatManager.reserve` raises `IndexError` when every seat
is taken.

## Examples

```python
from puzzlekit.greedy import max_profit_assignment
from puzzlekit.graphs import oranges_rotting
from puzzlekit.windows import kth_largest_value

max_profit_assignment([2, 4, 6, 8, 10], [10, 20, 30, 40, 50], [4, 5, 6, 7])  # 100
oranges_rotting([[2, 1, 1], [1, 1, 0], [0, 1, 1]])                          # 4
kth_largest_value([[5, 2], [1, 6]], 1)                                      # 7
```

Stateful helpers are ordinary classes:

```python
from puzzlekit.structures import ListNode, SeatManager, merge_nodes

seats = SeatManager(5)
seats.reserve()      # 1
seats.reserve()      # 2
seats.unreserve(1)
seats.reserve()      # 1

head = ListNode(0, ListNode(3, ListNode(1, ListNode(0, ListNode(4, ListNode(0))))))
merge_nodes(head).to_list()   # [4, 4]
```

`ListNode` is a dataclass with `val` and `next`; iterating over a node yields
the values from it to the end of the list.

## The judge-style problems

`puzzlekit.ccf` holds three problems that read their whole input as text:

* `repeated` — an integer `n`, then `n` boards of eight whitespace-separated
  rows each; prints, for every board, how many times that board has appeared
  so far.
* `attention` — `n d`, then the `n×d` matrices `q`, `k`, `v` and a vector `w`
  of length `n`; prints `diag(w) · q · (kᵀ · v)` one row per line.
* `decompress` — a byte count `n`, then the input as hex text in `(n + 7) // 8`
  tokens; decodes the length header, literal runs and back-references, and
  prints the output as hex, 8 bytes (16 hex digits) per line.

The same problems are available from the command line, reading standard input
and writing the answer to standard output:

```
puzzlekit-ccf repeated < boards.txt
puzzlekit-ccf attention < matrices.txt
puzzlekit-ccf decompress < data.txt
puzzlekit-ccf --help
```

Malformed input (too few numbers, truncated or inconsistent compressed data)
is reported on standard error as `error: ...` with exit status 1.