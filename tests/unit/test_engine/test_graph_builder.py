"""Unit tests for adjacency construction."""

from __future__ import annotations

from clusterlens.engine.graph_builder import build_adjacency, is_valid_edge, valid_edges


def test_every_vertex_present_even_without_edges():
    graph = build_adjacency(5, [])
    assert graph == {1: [], 2: [], 3: [], 4: [], 5: []}


def test_both_directions_in_insertion_order():
    graph = build_adjacency(4, [[1, 2], [1, 3], [4, 1]])
    assert graph[1] == [2, 3, 4]
    assert graph[2] == [1]
    assert graph[4] == [1]


def test_duplicates_and_self_loops_kept():
    graph = build_adjacency(3, [[1, 2], [1, 2], [3, 3]])
    assert graph[1] == [2, 2]
    assert graph[3] == [3, 3]


def test_out_of_range_edges_dropped():
    graph = build_adjacency(4, [[1, 5], [0, 2], [2, 3]])
    assert graph == {1: [], 2: [3], 3: [2], 4: []}


def test_is_valid_edge():
    assert is_valid_edge([1, 4], 4)
    assert is_valid_edge((2, 2), 4)
    assert not is_valid_edge([1, 5], 4)
    assert not is_valid_edge([0, 1], 4)
    assert not is_valid_edge(["1", 2], 4)
    assert not is_valid_edge([1.0, 2], 4)
    assert not is_valid_edge([True, 2], 4)


def test_valid_edges_preserves_order():
    assert list(valid_edges(3, [[3, 1], [9, 9], (2, 3)])) == [(3, 1), (2, 3)]
