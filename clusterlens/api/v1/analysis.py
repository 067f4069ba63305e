"""Component analysis and algorithm comparison endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from clusterlens.api.dependencies import get_analysis_service
from clusterlens.api.v1.schemas.analysis import AnalyzeRequest, CompareRequest
from clusterlens.models.schemas import AnalysisResponse, ComparisonEntry
from clusterlens.services.analysis_service import AnalysisService
from clusterlens.utils.exceptions import GraphAnalysisError, InternalError
from clusterlens.utils.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(tags=["analysis"])


# Plain ``def`` handlers: the computation is CPU-bound and synchronous, so
# FastAPI runs it in the worker threadpool instead of on the event loop.


@router.post("/analyze", response_model=AnalysisResponse)
def analyze(
    request: AnalyzeRequest,
    service: AnalysisService = Depends(get_analysis_service),
) -> AnalysisResponse:
    """Find connected components and return graph data ready for rendering."""
    try:
        return service.analyze(request.n, request.edges, request.algorithm)
    except GraphAnalysisError:
        raise
    except Exception as exc:
        logger.error("analysis_failed", algorithm=request.algorithm, error=str(exc))
        raise InternalError(str(exc)) from exc


@router.post("/compare", response_model=dict[str, ComparisonEntry])
def compare(
    request: CompareRequest,
    service: AnalysisService = Depends(get_analysis_service),
) -> dict[str, ComparisonEntry]:
    """Run every algorithm on the same graph and report component count and time."""
    try:
        return service.compare(request.n, request.edges)
    except GraphAnalysisError:
        raise
    except Exception as exc:
        logger.error("comparison_failed", error=str(exc))
        raise InternalError(str(exc)) from exc
