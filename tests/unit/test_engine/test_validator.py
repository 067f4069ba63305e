"""Unit tests for structural input validation."""

from __future__ import annotations

import pytest

from clusterlens.engine.validator import validate_graph_input
from clusterlens.utils.exceptions import (
    GraphInputError,
    InvalidEdgeList,
    InvalidVertexCount,
    TooManyEdges,
)


@pytest.mark.parametrize("n", [None, 0, -3, 100_001, 2.5, "10", True])
def test_rejects_bad_vertex_count(n):
    with pytest.raises(InvalidVertexCount):
        validate_graph_input(n, [])


@pytest.mark.parametrize("n", [1, 100_000])
def test_accepts_vertex_count_bounds(n):
    validate_graph_input(n, [])


@pytest.mark.parametrize("edges", [None, "1 2", {"1": 2}, 5])
def test_rejects_non_sequence_edges(edges):
    with pytest.raises(InvalidEdgeList):
        validate_graph_input(3, edges)


@pytest.mark.parametrize("bad", [[1], [1, 2, 3], 7, "12"])
def test_rejects_entries_that_are_not_pairs(bad):
    with pytest.raises(InvalidEdgeList, match="index 1"):
        validate_graph_input(3, [[1, 2], bad])


def test_rejects_too_many_edges():
    edges = [[1, 1]] * 200_001
    with pytest.raises(TooManyEdges):
        validate_graph_input(2, edges)


def test_edge_limit_is_inclusive():
    validate_graph_input(2, [[1, 2]] * 200_000)


def test_out_of_range_endpoints_are_not_rejected():
    validate_graph_input(4, [[1, 5], [0, 2], [-1, 9]])


def test_custom_limits():
    with pytest.raises(InvalidVertexCount, match="10"):
        validate_graph_input(11, [], max_vertices=10)
    with pytest.raises(TooManyEdges):
        validate_graph_input(5, [[1, 2]] * 3, max_edges=2)


def test_input_errors_map_to_client_status():
    assert issubclass(TooManyEdges, GraphInputError)
    assert TooManyEdges.status_code == 400


def test_does_not_mutate_input():
    edges = [[2, 1], (3, 4)]
    validate_graph_input(4, edges)
    assert edges == [[2, 1], (3, 4)]
