"""Shared test fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _env_setup(monkeypatch):
    """Pin configuration so a developer's .env cannot leak into tests."""
    monkeypatch.setenv("MAX_VERTICES", "100000")
    monkeypatch.setenv("MAX_EDGES", "200000")
    monkeypatch.setenv("DEFAULT_ALGORITHM", "bfs")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("LOG_FORMAT", "console")


@pytest.fixture
def settings():
    from clusterlens.config import Settings

    return Settings()


@pytest.fixture
def service(settings):
    from clusterlens.services.analysis_service import AnalysisService

    return AnalysisService(settings)


@pytest.fixture
def square_graph() -> dict:
    """Four vertices on a cycle: one component, four internal edges."""
    return {"n": 4, "edges": [[1, 2], [2, 3], [3, 4], [4, 1]]}


@pytest.fixture
def mixed_graph() -> dict:
    """Two chains, a triangle, a self-loop, a duplicate edge and two bad edges."""
    return {
        "n": 10,
        "edges": [
            [1, 2], [2, 3],
            [4, 5], [5, 6], [6, 4],
            [7, 7],
            [8, 9], [8, 9],
            [3, 11],
            [0, 1],
        ],
    }
