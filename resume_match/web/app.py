"""FastAPI app entrypoint for Resume Match web APIs."""

from __future__ import annotations

import logging
import os
from time import perf_counter
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from ..analyzer import ResumeAnalyzer
from ..config import load_config
from ..errors import ResumeMatchError
from .api.v1.router import api_v1_router
from .errors import pipeline_error_handler, validation_error_handler

logger = logging.getLogger("resume_match.web.api")


def create_app(analyzer: Optional[ResumeAnalyzer] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if analyzer is None:
        config_path = os.getenv("RESUME_MATCH_CONFIG", "config/config.local.yaml")
        analyzer = ResumeAnalyzer(load_config(config_path))

    app = FastAPI(title="Resume Match API", version="0.1.0")
    app.state.analyzer = analyzer
    app.include_router(api_v1_router)

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        start = perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (perf_counter() - start) * 1000
            logger.info(
                "api_request method=%s path=%s status=%s duration_ms=%.2f provider=%s",
                request.method,
                request.url.path,
                500,
                duration_ms,
                analyzer.config.provider,
            )
            raise

        duration_ms = (perf_counter() - start) * 1000
        logger.info(
            "api_request method=%s path=%s status=%s duration_ms=%.2f provider=%s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            analyzer.config.provider,
        )
        return response

    @app.get("/healthz", tags=["system"])
    async def healthz() -> dict:
        return {"status": "ok"}

    app.add_exception_handler(ResumeMatchError, pipeline_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    return app


def main() -> None:
    """Run development API server."""
    import uvicorn

    uvicorn.run("resume_match.web.app:create_app", factory=True, host="127.0.0.1", port=8000)
