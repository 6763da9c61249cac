"""Union-find and queries over connected power-grid stations."""

from __future__ import annotations

import heapq
from typing import Iterable, Sequence


class DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        self.parent = list(range(size))
        self.rank = [1] * size

    def find(self, x: int) -> int:
        """Return the representative of ``x``'s set."""
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: int, y: int) -> None:
        """Merge the sets holding ``x`` and ``y``."""
        x_root, y_root = self.find(x), self.find(y)
        if x_root == y_root:
            return
        if self.rank[x_root] > self.rank[y_root]:
            self.parent[y_root] = x_root
        elif self.rank[x_root] < self.rank[y_root]:
            self.parent[x_root] = y_root
        else:
            self.parent[x_root] = y_root
            self.rank[y_root] += 1


def process_queries(
    c: int,
    connections: Iterable[Sequence[int]],
    queries: Iterable[Sequence[int]],
) -> list[int]:
    """Answer grid queries over stations ``1..c``.

    A query ``[1, x]`` yields ``x`` if it is online, otherwise the smallest
    online station in its component, or -1 if there is none. Any other query
    ``[_, x]`` takes station ``x`` offline.
    """
    dsu = DisjointSet(c + 1)
    for a, b in connections:
        dsu.union(a, b)

    online = [True] * (c + 1)
    components: dict[int, list[int]] = {}
    for station in range(1, c + 1):
        components.setdefault(dsu.find(station), []).append(station)

    answers: list[int] = []
    for kind, station in queries:
        if kind == 1:
            if online[station]:
                answers.append(station)
                continue
            heap = components[dsu.find(station)]
            while heap and not online[heap[0]]:
                heapq.heappop(heap)
            answers.append(heap[0] if heap else -1)
        else:
            online[station] = False
    return answers