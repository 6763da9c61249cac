"""Greedy routines over parity arrays and adjacent word prefixes."""

from __future__ import annotations

from itertools import accumulate, takewhile
from typing import Sequence


def _placement_cost(positions: Sequence[int]) -> int:
    """Adjacent swaps needed to move ``positions`` onto slots 0, 2, 4, ..."""
    return sum(abs(pos - 2 * slot) for slot, pos in enumerate(positions))


def min_swaps(nums: Sequence[int]) -> int:
    """Return the fewest adjacent swaps that make the parities of ``nums``
    alternate, or -1 if that is impossible."""
    even_positions = [i for i, value in enumerate(nums) if value % 2 == 0]
    odd_positions = [i for i, value in enumerate(nums) if value % 2 != 0]

    if abs(len(odd_positions) - len(even_positions)) > 1:
        return -1
    if len(nums) % 2 == 0:
        return min(
            _placement_cost(even_positions),
            _placement_cost(odd_positions),
        )
    if len(odd_positions) > len(even_positions):
        return _placement_cost(odd_positions)
    return _placement_cost(even_positions)


def common_prefix_length(a: str, b: str) -> int:
    """Return the length of the longest common prefix of ``a`` and ``b``."""
    return sum(1 for _ in takewhile(lambda pair: pair[0] == pair[1], zip(a, b)))


def longest_common_prefix(words: Sequence[str]) -> list[int]:
    """For each word, return the longest common prefix between adjacent words
    once that word is removed from the list."""
    n = len(words)
    if n == 0:
        raise ValueError("words must not be empty")
    if n == 1:
        return [0]

    lcp = [common_prefix_length(a, b) for a, b in zip(words, words[1:])]
    # before[j] is the max of lcp[:j]; after[j] is the max of lcp[j:].
    before = list(accumulate(lcp, max, initial=0))
    after = list(accumulate(reversed(lcp), max, initial=0))[::-1]

    result = []
    for i in range(n):
        best = max(
            before[i - 1] if i >= 1 else 0,
            after[i + 1] if i + 1 < n else 0,
        )
        if 0 < i < n - 1:
            best = max(best, common_prefix_length(words[i - 1], words[i + 1]))
        result.append(best)
    return result