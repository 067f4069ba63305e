"""FastAPI application factory."""

from __future__ import annotations

import uuid

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from clusterlens.api.router import api_router
from clusterlens.config import get_settings
from clusterlens.utils.exceptions import GraphAnalysisError
from clusterlens.utils.logging import get_logger, setup_logging_from_settings

logger = get_logger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging_from_settings(settings)

    application = FastAPI(
        title="ClusterLens",
        description="Connected component analysis for undirected graphs",
        version="0.1.0",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(api_router)

    @application.middleware("http")
    async def request_id_middleware(request: Request, call_next) -> Response:
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    @application.exception_handler(GraphAnalysisError)
    async def graph_error_handler(request: Request, exc: GraphAnalysisError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("analysis_internal_error", error=str(exc), path=request.url.path)
        else:
            logger.info("analysis_rejected", error=str(exc), type=type(exc).__name__)
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})

    @application.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request body") if errors else "Invalid request body"
        return JSONResponse(status_code=400, content={"error": message})

    @application.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("unhandled_exception", error=str(exc), path=request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    return application


app = create_app()
