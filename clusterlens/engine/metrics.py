"""Per-vertex records, link list and whole-graph statistics."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from clusterlens.engine.graph_builder import valid_edges
from clusterlens.engine.results import PartitionResult
from clusterlens.models.schemas import GraphStatistics, LinkRecord, NodeRecord
from clusterlens.utils.exceptions import NoComponents


def build_nodes(n: int, result: PartitionResult) -> list[NodeRecord]:
    """One record per vertex. Degree is 0 when the strategy kept no adjacency."""
    return [
        NodeRecord(
            id=vertex,
            group=result.node_to_group[vertex],
            degree=len(result.graph.get(vertex, ())),
        )
        for vertex in range(1, n + 1)
    ]


def build_links(n: int, edges: Sequence[Sequence[Any]]) -> list[LinkRecord]:
    return [LinkRecord(source=u, target=v) for u, v in valid_edges(n, edges)]


def graph_density(n: int, edge_count: int) -> float:
    if n <= 1:
        return 0.0
    return edge_count / (n * (n - 1) / 2)


def compute_statistics(
    n: int,
    result: PartitionResult,
    links: Sequence[LinkRecord],
    *,
    elapsed_ms: float,
    algorithm: str,
) -> GraphStatistics:
    sizes = [component.size for component in result.component_info]
    if not sizes or result.components < 1:
        raise NoComponents(f"No components found for n={n}")

    return GraphStatistics(
        isolated_nodes=sum(1 for size in sizes if size == 1),
        largest_component=max(sizes),
        smallest_component=min(sizes),
        avg_component_size=round(sum(sizes) / result.components, 2),
        total_edges=len(links),
        density=graph_density(n, len(links)),
        execution_time=format_elapsed(elapsed_ms),
        algorithm=algorithm,
    )


def format_elapsed(elapsed_ms: float) -> str:
    return f"{elapsed_ms:.2f}ms"
