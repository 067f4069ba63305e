"""Exception hierarchy for the graph analysis engine.

Each error carries the HTTP status it maps to so the transport layer can
translate it without a lookup table.
"""

from __future__ import annotations


class GraphAnalysisError(Exception):
    """Base exception for all graph analysis errors."""

    status_code: int = 500


class GraphInputError(GraphAnalysisError):
    """Client supplied a structurally unusable graph. No algorithm runs."""

    status_code = 400


class InvalidVertexCount(GraphInputError):
    """Vertex count is missing, not an integer, or outside the allowed range."""


class InvalidEdgeList(GraphInputError):
    """Edge list is not a sequence of [u, v] pairs."""


class TooManyEdges(GraphInputError):
    """Edge list exceeds the admission limit."""


class InternalError(GraphAnalysisError):
    """Unexpected failure while computing components."""


class NoComponents(InternalError):
    """A validated graph produced an empty component list."""
