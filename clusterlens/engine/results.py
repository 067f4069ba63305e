"""Plain result records produced by the connectivity strategies."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ComponentInfo:
    nodes: list[int]
    size: int
    edges: int = 0
    density: float = 0.0

    @classmethod
    def from_members(cls, nodes: list[int], degree_sum: int) -> ComponentInfo:
        """Build component info from its members and the sum of their degrees.

        Every internal edge is seen from both endpoints, so the degree sum is
        twice the edge count.
        """
        size = len(nodes)
        edges = degree_sum // 2
        density = edges / (size * (size - 1)) if size > 1 else 0.0
        return cls(nodes=nodes, size=size, edges=edges, density=density)


@dataclass
class PartitionResult:
    """Common output contract of every connectivity strategy."""

    components: int
    node_to_group: dict[int, int]
    component_info: list[ComponentInfo]
    # Empty for strategies that never materialize adjacency (union-find).
    graph: dict[int, list[int]] = field(default_factory=dict)
