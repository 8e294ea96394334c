# puzzlekit

A small collection of solutions to well-known programming puzzles. It covers
arrays and hashing, stacks, and a warm-up exercise. Every solution is a plain
function (or, for the minimum stack, a small class) that takes ordinary Python
values and returns them. The package has no dependencies beyond the standard
library.

## Installation

```
pip install .
```

## Modules

### `puzzlekit.arrays`

- `two_sum(nums, target)`: indices `[i, j]` of two entries adding up to
  `target`, or `[]` if there are none.
- `longest_consecutive(nums)`: length of the longest run of consecutive
  integers.
- `longest_common_prefix(strs)`: the prefix shared by every string.
- `get_concatenation(nums)`: the sequence followed by itself.
- `contains_duplicate(nums)`: whether any value appears more than once.
- `product_except_self(nums)`: for each position, the product of all the other
  entries.
- `is_anagram(s, t)`: whether `t` is a rearrangement of `s`.
- `remove_element(nums, val)`: removes every `val` from the list in place and
  returns how many entries are left.
- `top_k_frequent(nums, k)`: the `k` most frequent values, most frequent first;
  ties go to the larger value. Raises `ValueError` if `k` is negative or larger
  than the number of distinct values.
- `is_valid_sudoku(board)`: whether the filled cells of a 9x9 board (empty
  cells are `"."`) break no sudoku rule.
- `group_anagrams(strs)`: groups words that are anagrams of one another, in
  order of first appearance. Words must be lowercase ASCII letters; anything
  else raises `ValueError`.

### `puzzlekit.stacks`

- `MinStack`: a stack with `push(val)`, `pop()`, `top()` and `get_min()`, the
  last returning the smallest element in constant time. `pop`, `top` and
  `get_min` raise `IndexError` on an empty stack; `len()` gives its size.
- `eval_rpn(tokens)`: evaluates an integer expression in reverse Polish
  notation using `+`, `-`, `*` and `/`; division truncates toward zero. Raises
  `ValueError` when an operator lacks operands or the expression is empty.
- `is_valid_parentheses(s)`: whether every `)`, `]` and `}` closes the matching
  bracket and nothing is left open.
- `daily_temperatures(temperatures)`: for each day, the number of days until a
  warmer one, or `0` if none comes.
- `car_fleet(target, position, speed)`: the number of car fleets that arrive at
  `target`.

### `puzzlekit.misc`

- `fizz_buzz(n)`: the Fizz Buzz words for 1 through `n`.

## Examples

```python
from puzzlekit.arrays import two_sum, group_anagrams
from puzzlekit.stacks import MinStack, eval_rpn, daily_temperatures
from puzzlekit.misc import fizz_buzz

two_sum([2, 7, 11, 15], 9)                 # [0, 1]
eval_rpn(["2", "1", "+", "3", "*"])        # 9
daily_temperatures([73, 74, 75, 71, 69, 72, 76, 73])
# [1, 1, 4, 2, 1, 1, 0, 0]
fizz_buzz(5)                               # ['1', '2', 'Fizz', '4', 'Buzz']

stack = MinStack()
stack.push(3)
stack.push(1)
stack.get_min()                            # 1
stack.pop()
stack.get_min()                            # 3
```

## What it does not do

The package is a library only: it has no command-line program, and it does not
read puzzle input from files or standard input.

## Running the tests

```
pip install .[test]
pytest
```