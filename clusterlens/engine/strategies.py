"""Interchangeable connectivity strategies for partitioning a graph.

Every strategy returns a :class:`PartitionResult`. BFS and DFS traverse an
adjacency mapping and report per-component edge counts and density;
union-find works straight from the edge list and reports membership only.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Sequence
from typing import Any

from clusterlens.engine.graph_builder import build_adjacency, valid_edges
from clusterlens.engine.results import ComponentInfo, PartitionResult
from clusterlens.engine.union_find import UnionFind
from clusterlens.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ALGORITHM = "bfs"


class ConnectivityStrategy(ABC):
    """Abstract base for component-finding algorithms."""

    name: str = ""

    @abstractmethod
    def partition(self, n: int, edges: Sequence[Sequence[Any]]) -> PartitionResult:
        """Split vertices ``1..n`` into connected components."""
        ...


class TraversalStrategy(ConnectivityStrategy):
    """Base for adjacency-walking strategies. Subclasses supply ``_traverse``."""

    def partition(self, n: int, edges: Sequence[Sequence[Any]]) -> PartitionResult:
        graph = build_adjacency(n, edges)
        visited = [False] * (n + 1)
        node_to_group: dict[int, int] = {}
        component_info: list[ComponentInfo] = []

        for start in range(1, n + 1):
            if visited[start]:
                continue
            group = len(component_info) + 1
            members = self._traverse(graph, start, visited)
            for vertex in members:
                node_to_group[vertex] = group
            degree_sum = sum(len(graph[vertex]) for vertex in members)
            component_info.append(ComponentInfo.from_members(members, degree_sum))

        return PartitionResult(
            components=len(component_info),
            node_to_group=node_to_group,
            component_info=component_info,
            graph=graph,
        )

    @abstractmethod
    def _traverse(self, graph: dict[int, list[int]], start: int, visited: list[bool]) -> list[int]:
        """Mark and return every vertex reachable from ``start``, in visit order."""
        ...


class BFSStrategy(TraversalStrategy):
    name = "bfs"

    def _traverse(self, graph: dict[int, list[int]], start: int, visited: list[bool]) -> list[int]:
        members: list[int] = []
        queue = deque([start])
        visited[start] = True
        while queue:
            node = queue.popleft()
            members.append(node)
            for neighbor in graph[node]:
                if not visited[neighbor]:
                    visited[neighbor] = True
                    queue.append(neighbor)
        return members


class DFSStrategy(TraversalStrategy):
    """Depth-first traversal on an explicit stack.

    Neighbors are pushed in reverse so vertices come off the stack in the
    same pre-order a recursive walk would produce, without the recursion
    limit on long paths.
    """

    name = "dfs"

    def _traverse(self, graph: dict[int, list[int]], start: int, visited: list[bool]) -> list[int]:
        members: list[int] = []
        stack = [start]
        while stack:
            node = stack.pop()
            if visited[node]:
                continue
            visited[node] = True
            members.append(node)
            for neighbor in reversed(graph[node]):
                if not visited[neighbor]:
                    stack.append(neighbor)
        return members


class UnionFindStrategy(ConnectivityStrategy):
    """Disjoint-set partition.

    Edge counts and density are reported as zero and no adjacency is
    returned: the forest never sees which edges fall inside a component.
    """

    name = "union-find"

    def partition(self, n: int, edges: Sequence[Sequence[Any]]) -> PartitionResult:
        uf = UnionFind(n)
        for u, v in valid_edges(n, edges):
            uf.union(u, v)

        root_to_group: dict[int, int] = {}
        members_by_group: dict[int, list[int]] = {}
        node_to_group: dict[int, int] = {}
        for vertex in range(1, n + 1):
            root = uf.find(vertex)
            group = root_to_group.setdefault(root, len(root_to_group) + 1)
            node_to_group[vertex] = group
            members_by_group.setdefault(group, []).append(vertex)

        component_info = [
            ComponentInfo(nodes=members, size=len(members))
            for members in members_by_group.values()
        ]
        return PartitionResult(
            components=uf.components,
            node_to_group=node_to_group,
            component_info=component_info,
        )


STRATEGIES: dict[str, ConnectivityStrategy] = {
    strategy.name: strategy
    for strategy in (BFSStrategy(), DFSStrategy(), UnionFindStrategy())
}


def get_strategy(name: str | None) -> ConnectivityStrategy:
    """Look up a strategy by key. Unknown or missing keys fall back to BFS."""
    if name is None:
        return STRATEGIES[DEFAULT_ALGORITHM]
    strategy = STRATEGIES.get(name)
    if strategy is None:
        logger.warning("unknown_algorithm_fallback", requested=name, using=DEFAULT_ALGORITHM)
        return STRATEGIES[DEFAULT_ALGORITHM]
    return strategy
