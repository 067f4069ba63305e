"""Pydantic models for analysis results as they leave the engine.

Field names are snake_case in Python and camelCase on the wire, matching
what the visualization client consumes.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Per-vertex / per-edge records ────────────────────────────────────


class NodeRecord(CamelModel):
    id: int
    group: int
    degree: int = 0


class LinkRecord(CamelModel):
    source: int
    target: int


# ── Component and graph statistics ───────────────────────────────────


class ComponentSummary(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    nodes: list[int] = Field(default_factory=list)
    size: int
    edges: int = 0
    density: float = 0.0


class GraphStatistics(CamelModel):
    isolated_nodes: int
    largest_component: int
    smallest_component: int
    avg_component_size: float
    total_edges: int
    density: float
    execution_time: str = Field(description="Wall-clock strategy time, e.g. '1.25ms'")
    algorithm: str


class AnalysisResponse(CamelModel):
    components: int
    nodes: list[NodeRecord] = Field(default_factory=list)
    links: list[LinkRecord] = Field(default_factory=list)
    component_info: list[ComponentSummary] = Field(default_factory=list)
    statistics: GraphStatistics


class ComparisonEntry(CamelModel):
    components: int
    time: float = Field(description="Wall-clock milliseconds")
