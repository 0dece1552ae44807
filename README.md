# oitools

Algorithms and small data structures for competitive programming
practice, in plain Python with no dependencies beyond the standard
library.

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

- `oitools.strings`: the KMP `prefix_function`, two searches for every
  (overlapping) match of a pattern (`find_occurrences`, `kmp_search`),
  `read_signed` for scanning a signed decimal integer out of a string, and
  Roman numerals (`int_to_roman`, `int_to_roman_by_digits`,
  `roman_to_int`).
- `oitools.heaps`: `BinaryHeap`, a list-backed heap with `push`, `pop`,
  `top`, `merge` and `empty`. The default comparison `operator.lt` makes a
  max-heap; pass `compare=operator.gt` for a min-heap.
- `oitools.graph`: `Graph`, a directed weighted graph with `add_node`,
  `connect`, `remove_edge`, `remove_node`, `is_reachable` (following edge
  directions) and `is_weakly_connected`. Its `components` property counts
  weakly connected components as the graph changes.
- `oitools.sequences`: `ArithmeticSequence`, `ArithmeticRun` and
  `ProgressionSum` (summing overlapping arithmetic runs position by
  position), `factorial`, `product_range`, `lis_lengths` (longest strictly
  increasing subsequence ending at each index) and
  `sliding_window_extremes` (minimum and maximum of every window).
- `oitools.bigint`: `BigInt`, a signed integer of any size built from an
  `int`, a decimal string or another `BigInt`. `//` and `%` truncate toward
  zero; `to_int` raises `OverflowError` outside the 32-bit signed range.
- `oitools.bigmath`: `big_abs`, `big_pow10`, `big_pow`, `big_sqrt`,
  `big_gcd`, `big_lcm` and `big_random` on `BigInt` values.
- `oitools.bigutil`: helpers on decimal digit strings
  (`is_valid_number`, `strip_leading_zeroes`, `add_leading_zeroes`,
  `add_trailing_zeroes`, `larger_and_smaller`, `is_power_of_10`).
- `oitools.leetcode`: `three_sum_closest`, `TreeNode`, `BSTIterator`,
  `lowest_common_ancestor`, `ATM`, `NestedIterator`, `PeekingIterator`,
  `RLEIterator` and `min_time_to_type`.
- `oitools.luogu`: `RadixNumber` (bases 2 to 16) and `palindrome_steps`
  (reverse-and-add until a palindrome, giving up after 31 steps),
  `add_digit_lists`, `add_reverse`, `is_palindrome_digits`,
  `count_pairs_with_difference`, `longest_balanced` and
  `smallest_separating_modulus`.
- `oitools.tools`: `LogWriter` (timestamped log lines to a file, a stream
  or standard output; usable as a context manager), `StopwatchMs`,
  `xor_invert_file` (an in-place byte transformation that undoes itself
  when applied twice with the same key) and `random_list`.

## Examples

```python
import operator

from oitools.strings import kmp_search, int_to_roman, roman_to_int
from oitools.heaps import BinaryHeap
from oitools.bigint import BigInt
from oitools.bigmath import big_pow
from oitools.luogu import palindrome_steps, longest_balanced
from oitools.leetcode import ATM, RLEIterator

kmp_search("abababa", "aba")          # [0, 2, 4]
int_to_roman(1994)                    # "MCMXCIV"
roman_to_int("MCMXCIV")               # 1994

heap = BinaryHeap([3, 1, 4, 1, 5])
heap.pop()                            # 5
low = BinaryHeap([3, 1, 4], compare=operator.gt)
low.top()                             # 1

(BigInt("123456789123456789") * 1000).to_string()  # "123456789123456789000"
divmod(BigInt(-7), 2)                 # (BigInt('-3'), BigInt('-1'))
big_pow(2, 100).to_string()           # "1267650600228229401496703205376"

palindrome_steps(10, "87")            # 4
longest_balanced([1, 0, 1, 1, 0, 0])  # 6

atm = ATM()
atm.deposit([0, 0, 1, 2, 1])
atm.withdraw(600)                     # [0, 0, 1, 0, 1]

RLEIterator([3, 8, 0, 9, 2, 5]).next(2)  # 8
```

## What it does not do

- There are no prime sieves, primality tests or gcd helpers for plain
  integers; `big_gcd` and `big_lcm` work on `BigInt` values.
- There is no general counter or radix sort.
- The package has no command-line program; it is used as a library.