"""Analysis facade: validate, partition, aggregate."""

from __future__ import annotations

import time
from collections.abc import Sequence
from typing import Any

from clusterlens.config import Settings
from clusterlens.engine.metrics import build_links, build_nodes, compute_statistics
from clusterlens.engine.results import PartitionResult
from clusterlens.engine.strategies import STRATEGIES, ConnectivityStrategy, get_strategy
from clusterlens.engine.validator import validate_graph_input
from clusterlens.models.schemas import AnalysisResponse, ComparisonEntry, ComponentSummary
from clusterlens.utils.logging import get_logger

logger = get_logger(__name__)


class AnalysisService:
    """Single entry point for component analysis and algorithm comparison.

    Holds configuration only; every call allocates its own graph structures.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def analyze(self, n: Any, edges: Any, algorithm: str | None = None) -> AnalysisResponse:
        self._validate(n, edges)
        strategy = get_strategy(algorithm or self._settings.DEFAULT_ALGORITHM)

        result, elapsed_ms = _timed_partition(strategy, n, edges)

        links = build_links(n, edges)
        statistics = compute_statistics(
            n, result, links, elapsed_ms=elapsed_ms, algorithm=strategy.name,
        )
        logger.info(
            "analysis_completed",
            algorithm=strategy.name,
            n=n,
            edges=len(edges),
            valid_edges=len(links),
            components=result.components,
            elapsed_ms=round(elapsed_ms, 3),
        )
        return AnalysisResponse(
            components=result.components,
            nodes=build_nodes(n, result),
            links=links,
            component_info=[ComponentSummary.model_validate(c) for c in result.component_info],
            statistics=statistics,
        )

    def compare(self, n: Any, edges: Any) -> dict[str, ComparisonEntry]:
        """Run every strategy on the same input and report count and time only."""
        self._validate(n, edges)

        results: dict[str, ComparisonEntry] = {}
        for name, strategy in STRATEGIES.items():
            result, elapsed_ms = _timed_partition(strategy, n, edges)
            results[name] = ComparisonEntry(
                components=result.components, time=round(elapsed_ms, 3),
            )

        logger.info(
            "comparison_completed",
            n=n,
            edges=len(edges),
            timings={name: entry.time for name, entry in results.items()},
        )
        return results

    def _validate(self, n: Any, edges: Any) -> None:
        validate_graph_input(
            n,
            edges,
            max_vertices=self._settings.MAX_VERTICES,
            max_edges=self._settings.MAX_EDGES,
        )


def _timed_partition(
    strategy: ConnectivityStrategy, n: int, edges: Sequence[Sequence[Any]],
) -> tuple[PartitionResult, float]:
    start = time.perf_counter()
    result = strategy.partition(n, edges)
    return result, (time.perf_counter() - start) * 1000
