"""Shared FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from clusterlens.config import get_settings
from clusterlens.services.analysis_service import AnalysisService


@lru_cache
def get_analysis_service() -> AnalysisService:
    return AnalysisService(get_settings())
