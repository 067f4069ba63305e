"""Adjacency construction from a raw edge list."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any


def is_valid_edge(edge: Sequence[Any], n: int) -> bool:
    """True when both endpoints are integer vertex ids in ``[1, n]``."""
    u, v = edge
    for endpoint in (u, v):
        if isinstance(endpoint, bool) or not isinstance(endpoint, int):
            return False
        if not 1 <= endpoint <= n:
            return False
    return True


def valid_edges(n: int, edges: Sequence[Sequence[Any]]) -> Iterator[tuple[int, int]]:
    """Yield the in-range edges in input order; everything else is skipped."""
    for edge in edges:
        if is_valid_edge(edge, n):
            yield edge[0], edge[1]


def build_adjacency(n: int, edges: Sequence[Sequence[Any]]) -> dict[int, list[int]]:
    """Map every vertex ``1..n`` to its neighbors, in edge insertion order.

    Both directions of each valid edge are recorded, so a self-loop lists the
    vertex in its own neighbors twice.
    """
    graph: dict[int, list[int]] = {vertex: [] for vertex in range(1, n + 1)}
    for u, v in valid_edges(n, edges):
        graph[u].append(v)
        graph[v].append(u)
    return graph
