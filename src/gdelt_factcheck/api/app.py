"""FastAPI application exposing the fact-check endpoint."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gdelt_factcheck.api.schemas import (
    ErrorResponse,
    FactCheckResponse,
    HealthResponse,
    ReliabilityOut,
)
from gdelt_factcheck.config import FactCheckConfig, create_from_config, resolve_config
from gdelt_factcheck.pipeline import FactCheckPipeline

logger = logging.getLogger(__name__)


def _error(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=error).model_dump())


def create_app(
    pipeline: FactCheckPipeline | None = None,
    *,
    config: FactCheckConfig | None = None,
) -> FastAPI:
    """Build the API application.

    Args:
        pipeline: Pipeline to serve. Built from ``config`` when omitted.
        config: Configuration; resolved from file and environment when omitted.

    Returns:
        Configured FastAPI app.
    """
    if config is None:
        config = resolve_config()
    if pipeline is None:
        pipeline, _run_logger = create_from_config(config)

    app = FastAPI(title="GDELT Fact-Check API")
    app.state.pipeline = pipeline

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse()

    @app.post("/api/fact-check-gdelt")
    async def fact_check(request: Request) -> JSONResponse:
        try:
            try:
                body = await request.json()
            except ValueError:
                body = None
            text = body.get("text") if isinstance(body, dict) else None
            if not isinstance(text, str) or not text.strip():
                return _error(400, "text_required")

            verdict = await request.app.state.pipeline.run(text)
            response = FactCheckResponse(reliability=ReliabilityOut.from_verdict(verdict))
            return JSONResponse(content=response.model_dump(by_alias=True))
        except Exception:
            logger.exception("Fact-check request failed")
            return _error(500, "internal_error")

    return app
