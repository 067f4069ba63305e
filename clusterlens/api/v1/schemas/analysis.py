"""Request models for the analysis API.

Fields are typed loosely on purpose: bounds and shape are enforced by the
engine's validator so that every rejection carries the same error contract.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class CompareRequest(BaseModel):
    n: Any = Field(default=None, examples=[6])
    edges: Any = Field(default=None, examples=[[[1, 2], [2, 3], [4, 5]]])


class AnalyzeRequest(CompareRequest):
    algorithm: str | None = Field(default=None, examples=["bfs", "dfs", "union-find"])
