"""Disjoint-set forest over vertex ids ``1..n``."""

from __future__ import annotations


class UnionFind:
    """Union by rank with path compression.

    ``parent``, ``rank`` and ``size`` are flat lists indexed by vertex id;
    index 0 is unused. ``find`` is not a pure query: it rewrites parent
    pointers along the path it walks so later lookups hit the root directly.
    """

    def __init__(self, n: int) -> None:
        self.parent: list[int] = list(range(n + 1))
        self.rank: list[int] = [0] * (n + 1)
        self.size: list[int] = [1] * (n + 1)
        self.components = n

    def find(self, x: int) -> int:
        if self.parent[x] != x:
            self.parent[x] = self.find(self.parent[x])
        return self.parent[x]

    def union(self, x: int, y: int) -> bool:
        """Merge the sets holding ``x`` and ``y``. False if already joined."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
            self.size[root_y] += self.size[root_x]
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
            self.size[root_x] += self.size[root_y]
        else:
            self.parent[root_y] = root_x
            self.size[root_x] += self.size[root_y]
            self.rank[root_x] += 1

        self.components -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def component_size(self, x: int) -> int:
        return self.size[self.find(x)]
