"""Structural admission checks run before any connectivity strategy."""

from __future__ import annotations

from typing import Any

from clusterlens.utils.exceptions import InvalidEdgeList, InvalidVertexCount, TooManyEdges

MAX_VERTICES = 100_000
MAX_EDGES = 200_000


def validate_graph_input(
    n: Any,
    edges: Any,
    *,
    max_vertices: int = MAX_VERTICES,
    max_edges: int = MAX_EDGES,
) -> None:
    """Reject structurally invalid input.

    Endpoint ranges are deliberately not checked here: an edge pointing
    outside ``[1, n]`` is dropped during graph construction, not rejected.
    """
    if n is None or isinstance(n, bool) or not isinstance(n, int) or not 1 <= n <= max_vertices:
        raise InvalidVertexCount(f"Invalid n: must be between 1 and {max_vertices:,}")

    if not isinstance(edges, (list, tuple)):
        raise InvalidEdgeList("Edges must be an array")

    if len(edges) > max_edges:
        raise TooManyEdges(f"Too many edges: maximum {max_edges:,}")

    for index, edge in enumerate(edges):
        if not isinstance(edge, (list, tuple)) or len(edge) != 2:
            raise InvalidEdgeList(f"Edge at index {index} must be a [u, v] pair")
