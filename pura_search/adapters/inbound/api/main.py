"""FastAPI application for the Pura Search API."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ....config.logging import setup_logging
from ....config.settings import settings
from ....core.domain.exceptions import PuraSearchError
from ...common.exception_handler import (
    format_exception_json,
    get_http_status_code,
    log_exception,
)
from .routers import content, health, search

setup_logging(settings.log_level, settings.log_file, settings.log_json)
logger = logging.getLogger(__name__)

# Shows full stack traces in error responses
DEBUG_MODE = settings.debug

app = FastAPI(
    title="Pura Search API",
    description=(
        "Keyword relevance search over educational articles about "
        "Balinese Hindu temples, festivals and philosophy."
    ),
    version=health.API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(search.router)
app.include_router(content.router)


# =============================================================================
# Global Exception Handlers
# =============================================================================


@app.exception_handler(PuraSearchError)
async def pura_search_error_handler(request: Request, exc: PuraSearchError) -> JSONResponse:
    """Handle all PuraSearchError exceptions with structured JSON response.

    Args:
        request: The incoming request.
        exc: The PuraSearchError exception.

    Returns:
        JSONResponse with structured error details.
    """
    status_code = get_http_status_code(exc)
    log_exception(
        exc,
        level=logging.WARNING if status_code < 500 else logging.ERROR,
        extra_context={"path": str(request.url.path), "method": request.method},
    )

    return JSONResponse(
        status_code=status_code,
        content=exc.to_dict(include_trace=DEBUG_MODE),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions with structured JSON response.

    Args:
        request: The incoming request.
        exc: The unhandled exception.

    Returns:
        JSONResponse with structured error details.
    """
    log_exception(exc, extra_context={"path": str(request.url.path), "method": request.method})

    error_data = format_exception_json(exc, include_trace=DEBUG_MODE)

    return JSONResponse(
        status_code=get_http_status_code(exc),
        content=error_data,
    )


# =============================================================================
# Lifecycle Events
# =============================================================================


@app.on_event("startup")
async def startup_event():
    """Log startup configuration."""
    logger.info("Pura Search API starting up...")
    logger.info("Corpus source: %s", settings.corpus_source)
    logger.info("API docs available at /docs")
    logger.info("Debug mode: %s", "ENABLED" if DEBUG_MODE else "DISABLED")


@app.on_event("shutdown")
async def shutdown_event():
    """Log shutdown."""
    logger.info("Pura Search API shutting down...")


# Export for uvicorn
__all__ = ["app"]
