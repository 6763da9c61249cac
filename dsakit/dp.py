"""Dynamic-programming routines over arrays, grids and pairs."""

from __future__ import annotations

from collections import deque
from functools import lru_cache
from typing import Sequence

MOD = 1_000_000_007


def num_of_arrays(n: int, m: int, k: int) -> int:
    """Count arrays of length ``n`` with values in ``1..m`` whose running
    maximum changes exactly ``k`` times, modulo 10**9 + 7."""
    if k > m:
        return 0

    @lru_cache(maxsize=None)
    def count(index: int, best: int, changes: int) -> int:
        if changes > k:
            return 0
        if index == n:
            return 1 if changes == k else 0
        # Every value not above the current maximum leaves the state unchanged.
        total = min(best, m) * count(index + 1, best, changes)
        for value in range(best + 1, m + 1):
            total += count(index + 1, value, changes + 1)
        return total % MOD

    try:
        return count(0, 0, 0)
    finally:
        count.cache_clear()


def calculate_minimum_hp(dungeon: Sequence[Sequence[int]]) -> int:
    """Return the minimum starting health needed to cross the dungeon from
    the top-left to the bottom-right cell moving only right or down."""
    if not dungeon or not dungeon[0]:
        raise ValueError("dungeon must be a non-empty grid")
    rows, cols = len(dungeon), len(dungeon[0])
    unreachable = 10**9

    below = [unreachable] * (cols + 1)
    for i in reversed(range(rows)):
        current = [unreachable] * (cols + 1)
        for j in reversed(range(cols)):
            cell = dungeon[i][j]
            if i == rows - 1 and j == cols - 1:
                current[j] = 1 if cell > 0 else abs(cell) + 1
                continue
            need = min(current[j + 1], below[j]) - cell
            current[j] = max(need, 1)
        below = current
    return below[0]


def max_alternating_sum(nums: Sequence[int]) -> int:
    """Return the largest alternating sum (+a -b +c ...) of any subsequence."""
    even = odd = 0
    for value in reversed(nums):
        even, odd = max(odd + value, even), max(even - value, odd)
    return even


def count_partitions(nums: Sequence[int], k: int) -> int:
    """Count ways to cut ``nums`` into contiguous segments whose max - min is
    at most ``k``, modulo 10**9 + 7."""
    ways = [1]
    prefix = [1]
    highs: deque[int] = deque()
    lows: deque[int] = deque()
    left = 0

    for i, value in enumerate(nums):
        while highs and nums[highs[-1]] <= value:
            highs.pop()
        highs.append(i)
        while lows and nums[lows[-1]] >= value:
            lows.pop()
        lows.append(i)

        while nums[highs[0]] - nums[lows[0]] > k:
            left += 1
            if highs[0] < left:
                highs.popleft()
            if lows[0] < left:
                lows.popleft()

        total = prefix[i] - (prefix[left - 1] if left > 0 else 0)
        ways.append(total % MOD)
        prefix.append((prefix[i] + ways[-1]) % MOD)

    return ways[-1]


def _combinations(coins: Sequence[int], amount: int) -> int:
    table = [1] + [0] * amount
    for coin in coins:
        for value in range(coin, amount + 1):
            table[value] += table[value - coin]
    return table[amount]


def find_coins(ways: Sequence[int]) -> list[int]:
    """Recover the coin denominations from the number of ways to make each
    amount ``1..len(ways)``; return an empty list if no set fits."""
    coins: list[int] = []
    for amount, expected in enumerate(ways, start=1):
        found = _combinations(coins, amount)
        if found == expected:
            continue
        if found == expected - 1:
            coins.append(amount)
        else:
            return []
    return coins


def largest_divisible_subset(nums: Sequence[int]) -> list[int]:
    """Return a largest subset in ascending order where every pair divides."""
    values = sorted(nums)
    if not values:
        return []

    lengths = [1] * len(values)
    parents = list(range(len(values)))
    best_len, best_end = 1, 0
    for i, value in enumerate(values):
        for j in range(i):
            if value % values[j] == 0 and lengths[i] < lengths[j] + 1:
                lengths[i] = lengths[j] + 1
                parents[i] = j
        if best_len < lengths[i]:
            best_len, best_end = lengths[i], i

    subset = [values[best_end]]
    while parents[best_end] != best_end:
        best_end = parents[best_end]
        subset.append(values[best_end])
    subset.reverse()
    return subset


def find_longest_chain(pairs: Sequence[Sequence[int]]) -> int:
    """Return the length of the longest chain of pairs where each pair's
    start exceeds the previous pair's end."""
    ordered = sorted(tuple(pair) for pair in pairs)
    ending: list[int] = []
    for i, (start, _) in enumerate(ordered):
        previous = (ending[j] for j in range(i) if start > ordered[j][1])
        ending.append(1 + max(previous, default=0))
    return max(ending, default=0)