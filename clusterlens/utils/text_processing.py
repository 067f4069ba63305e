"""Parsing of the plain-text edge format typed into the browser form."""

from __future__ import annotations

from clusterlens.utils.exceptions import InvalidEdgeList


def parse_edge_text(text: str) -> list[list[int]]:
    """Parse ``"1 2, 2 3, 4 5"`` into ``[[1, 2], [2, 3], [4, 5]]``.

    Blank chunks (trailing commas, empty input) are skipped. Range is not
    checked here; out-of-range pairs are dropped later like any other edge.
    """
    edges: list[list[int]] = []
    for chunk in text.split(","):
        tokens = chunk.split()
        if not tokens:
            continue
        if len(tokens) != 2:
            raise InvalidEdgeList(f"Edge {chunk.strip()!r} must be two vertex ids separated by a space")
        try:
            edges.append([int(tokens[0]), int(tokens[1])])
        except ValueError as exc:
            raise InvalidEdgeList(f"Edge {chunk.strip()!r} contains a non-integer vertex id") from exc
    return edges
