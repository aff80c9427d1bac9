"""
DAO Proposal Analyzer - FastAPI Application Entry Point.

Run with:
    uvicorn proposal_analyzer.main:app --reload --port 8000
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from proposal_analyzer.core.config import get_settings
from proposal_analyzer.core.exceptions import ClientInputError
from proposal_analyzer.api.analyze import error_response, router as analyze_router
from proposal_analyzer.integrations.openai_client import AnalysisClient
from proposal_analyzer.models import ErrorResponse


def setup_logging() -> logging.Logger:
    """Send application logs to stdout; quiet the HTTP client libraries."""
    level = logging.DEBUG if get_settings().DEBUG else logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    for noisy in ("httpx", "httpcore", "openai"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return logging.getLogger(__name__)


logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Own the shared completion client for the life of the process."""
    settings = get_settings()

    if not settings.OPENAI_API_KEY:
        logger.warning("OpenAI API key not configured!")
    if not settings.TALLY_API_KEY:
        logger.warning("Tally API key not configured - Tally proposals may fail")

    app.state.analysis_client = AnalysisClient(settings)
    logger.info(f"DAO Proposal Analyzer ready (model={settings.OPENAI_MODEL})")

    try:
        yield
    finally:
        await app.state.analysis_client.close()
        logger.info("DAO Proposal Analyzer shut down")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render routing errors (405, 404) in the API's ``{message}`` shape."""
    logger.warning(f"{request.method} {request.url.path}: {exc.status_code} {exc.detail}")
    if exc.status_code == 405:
        body = ClientInputError(message="Method not allowed", status_code=405).to_dict()
    else:
        body = {"message": str(exc.detail)}
    return error_response(exc.status_code, ErrorResponse(**body), headers=exc.headers)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for errors raised outside the analyze route."""
    logger.error(f"Unhandled error: {exc}", exc_info=True)
    error = str(exc) if get_settings().DEBUG else None
    return error_response(500, ErrorResponse(message="Internal server error", error=error))


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="DAO Proposal Analyzer",
        description="Summarizes DAO governance proposals and votes For/Against them under a policy.",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    app.include_router(analyze_router)

    @app.get("/", tags=["root"])
    async def root():
        """Service information."""
        return {
            "service": "DAO Proposal Analyzer",
            "version": "1.0.0",
            "status": "running",
            "endpoints": {
                "analyze": "POST /api/analyze",
                "health": "GET /api/health",
                "docs": "GET /docs"
            }
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("proposal_analyzer.main:app", host="0.0.0.0", port=8000)
