"""Unit tests for the metrics aggregator."""

from __future__ import annotations

import pytest

from clusterlens.engine.metrics import (
    build_links,
    build_nodes,
    compute_statistics,
    format_elapsed,
    graph_density,
)
from clusterlens.engine.results import ComponentInfo, PartitionResult
from clusterlens.engine.strategies import BFSStrategy, UnionFindStrategy
from clusterlens.utils.exceptions import InternalError, NoComponents


def test_build_nodes_uses_adjacency_degree(square_graph):
    result = BFSStrategy().partition(square_graph["n"], square_graph["edges"])
    nodes = build_nodes(4, result)
    assert [(node.id, node.group, node.degree) for node in nodes] == [
        (1, 1, 2), (2, 1, 2), (3, 1, 2), (4, 1, 2),
    ]


def test_build_nodes_degree_zero_without_graph():
    result = UnionFindStrategy().partition(3, [[1, 2], [2, 3]])
    assert [node.degree for node in build_nodes(3, result)] == [0, 0, 0]
    assert {node.group for node in build_nodes(3, result)} == {1}


def test_build_links_drops_invalid_edges():
    links = build_links(4, [[1, 2], [4, 5], [3, 3], [0, 1], [2, 4]])
    assert [(link.source, link.target) for link in links] == [(1, 2), (3, 3), (2, 4)]


@pytest.mark.parametrize(
    ("n", "edges", "expected"),
    [(1, 0, 0.0), (1, 3, 0.0), (2, 1, 1.0), (4, 3, 0.5)],
)
def test_graph_density(n, edges, expected):
    assert graph_density(n, edges) == pytest.approx(expected)


def test_statistics_for_isolated_vertices():
    result = BFSStrategy().partition(5, [])
    stats = compute_statistics(5, result, [], elapsed_ms=0.5, algorithm="bfs")
    assert stats.isolated_nodes == 5
    assert stats.largest_component == stats.smallest_component == 1
    assert stats.avg_component_size == 1.0
    assert stats.total_edges == 0
    assert stats.density == 0
    assert stats.execution_time == "0.50ms"
    assert stats.algorithm == "bfs"


def test_statistics_mixed(mixed_graph):
    n, edges = mixed_graph["n"], mixed_graph["edges"]
    result = BFSStrategy().partition(n, edges)
    links = build_links(n, edges)
    stats = compute_statistics(n, result, links, elapsed_ms=1.0, algorithm="bfs")

    assert stats.isolated_nodes == 2
    assert stats.largest_component == 3
    assert stats.smallest_component == 1
    assert stats.avg_component_size == 2.0
    assert stats.total_edges == 8
    assert stats.density == pytest.approx(8 / 45)
    assert stats.smallest_component <= stats.avg_component_size <= stats.largest_component


def test_average_is_rounded_to_two_places():
    result = BFSStrategy().partition(7, [[1, 2], [2, 3]])
    stats = compute_statistics(7, result, [], elapsed_ms=0.0, algorithm="bfs")
    assert stats.avg_component_size == 1.4


def test_empty_component_list_is_guarded():
    empty = PartitionResult(components=0, node_to_group={}, component_info=[])
    with pytest.raises(NoComponents):
        compute_statistics(3, empty, [], elapsed_ms=0.0, algorithm="bfs")
    assert issubclass(NoComponents, InternalError)


def test_zero_count_with_components_is_guarded():
    broken = PartitionResult(
        components=0, node_to_group={1: 1}, component_info=[ComponentInfo(nodes=[1], size=1)],
    )
    with pytest.raises(NoComponents):
        compute_statistics(1, broken, [], elapsed_ms=0.0, algorithm="bfs")


def test_format_elapsed():
    assert format_elapsed(12.3456) == "12.35ms"
