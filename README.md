# dsakit

A small collection of classic algorithms written as plain Python functions,
grouped by technique. The package has no runtime dependencies and needs
Python 3.10 or later.

## Installation

```
pip install .
```

## Modules

### `dsakit.dp`: dynamic programming

- `num_of_arrays(n, m, k)`: the number of arrays of length `n` with values in
  `1..m` whose running maximum changes exactly `k` times, modulo 10**9 + 7.
  Returns 0 when `k > m`.
- `calculate_minimum_hp(dungeon)`: the minimum starting health needed to go
  from the top-left to the bottom-right cell of a grid, moving only right or
  down. Raises `ValueError` for an empty grid.
- `max_alternating_sum(nums)`: the largest `+a -b +c ...` sum of any
  subsequence.
- `count_partitions(nums, k)`: the number of ways to cut `nums` into
  contiguous segments whose max minus min is at most `k`, modulo 10**9 + 7.
- `find_coins(ways)`: recovers coin denominations from the number of ways to
  make each amount `1..len(ways)`; returns an empty list if no set fits.
- `largest_divisible_subset(nums)`: a largest subset, in ascending order, in
  which every pair divides one another.
- `find_longest_chain(pairs)`: the length of the longest chain of pairs where
  each pair's start is greater than the previous pair's end.

### `dsakit.dsu`: union-find

- `DisjointSet(size)` with `find(x)` and `union(x, y)`, using path
  compression and union by rank.
- `process_queries(c, connections, queries)`: stations `1..c` are joined by
  `connections`. A query `[1, x]` yields `x` if it is online, otherwise the
  smallest online station in its component, or -1 if there is none. Any other
  query `[_, x]` takes station `x` offline. Returns the answers to the
  `[1, x]` queries in order.

### `dsakit.greedy`

- `min_swaps(nums)`: the fewest adjacent swaps that make the parities of
  `nums` alternate, or -1 if that is impossible.
- `common_prefix_length(a, b)`: the length of the common prefix of two strings.
- `longest_common_prefix(words)`: for each word, the longest common prefix
  between adjacent words once that word is removed. Raises `ValueError` for an
  empty list.

### `dsakit.text`

- `to_base(num, base)`: a positive integer in bases 2 to 36 with upper-case
  digits; zero and negative numbers give an empty string.
- `concat_hex36(n)`: `n**2` in hexadecimal followed by `n**3` in base 36.
- `tokens(s, sep)`: splits on `sep` and drops empty pieces.
- `defang_ip_addr(address)`: replaces each separating period with `[.]`.
- `truncate_sentence(s, k)`: the first `k` words joined by single spaces;
  raises `ValueError` if the sentence has fewer than `k` words.
- `uncommon_from_sentences(s1, s2)`: words that occur exactly once across both
  sentences.

### `dsakit.tree`

- `TreeNode`: a dataclass with `val`, `left` and `right`.
- `from_level_order(values)`: builds a tree from a level-order list where
  `None` marks a missing child.
- `build_tree(preorder, inorder)` and `build_tree_from_postorder(inorder,
  postorder)`: rebuild a tree of distinct values from two traversals; raise
  `ValueError` if the traversals differ in length or values, or repeat a value.
- `tree_to_str(root)`: preorder string with parenthesised children, writing an
  empty left child as `()` only when a right child follows.

### `dsakit.paths`

- `has_path_sum(root, target_sum)` and `path_sum(root, target_sum)`: whether
  a root-to-leaf path adds up to the target, and every such path, left first.
- `sum_numbers(root)`: the sum of the numbers spelled by the digits along each
  root-to-leaf path.
- `max_product(root)`: the largest product of the two sums left after cutting
  one edge, modulo 10**9 + 7, and at least 1.
- `longest_zigzag(root)`: the number of edges in the longest alternating
  downward path.
- `find_duplicate_subtrees(root)`: one root for each subtree shape that occurs
  more than once.

## Example

```python
from dsakit.dp import num_of_arrays
from dsakit.text import defang_ip_addr
from dsakit.tree import from_level_order, tree_to_str
from dsakit.paths import has_path_sum

print(num_of_arrays(2, 3, 1))          # 6
print(defang_ip_addr("1.1.1.1"))       # 1[.]1[.]1[.]1

root = from_level_order([1, 2, 3, None, 4])
print(tree_to_str(root))               # 1(2()(4))(3)
print(has_path_sum(root, 7))           # True
```

## What it does not do

The package is a library only: it has no command-line tool, and it reads no
input files. Call the functions from Python.

## Running the tests

```
pip install ".[test]"
pytest
```