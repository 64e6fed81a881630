"""
FastAPI Application - read-only REST API for the results table.

Endpoints:
    GET    /api/v1/results     Ranked results of finished games
    GET    /health             Health check
    GET    /                   API info

Games are never played over the API; it only serves what finished
games recorded in the results file.
"""

from typing import Annotated, Optional, Union
from pathlib import Path
import os

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from .. import __version__
from ..results import DEFAULT_RESULTS_FILE, GameResultRepository
from .schemas import (
    ErrorCode,
    ErrorResponse,
    GameResultInfo,
    HealthResponse,
    ResultsResponse,
)

# Environment configuration
FOXCATCHER_ENV = os.getenv("FOXCATCHER_ENV", "development")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")

DEFAULT_RESULTS_LIMIT = 15


def create_app(results_file: Optional[str | Path] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        results_file: Results file to serve (defaults to FOXCATCHER_RESULTS_FILE)

    Returns:
        FastAPI application instance
    """
    results_path = Path(results_file or DEFAULT_RESULTS_FILE)

    app = FastAPI(
        title="Fox Catcher Results API",
        description="Ranked results of finished Fox Catcher games.",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Optional[dict] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Report invalid query parameters in the standard error shape."""
        return make_error_response(
            ErrorCode.VALIDATION_ERROR,
            "Invalid request parameters",
            status_code=422,
            details={
                "errors": [
                    {"loc": [str(part) for part in error["loc"]], "msg": error["msg"]}
                    for error in exc.errors()
                ]
            },
        )

    # =========================================================================
    # Results Endpoint
    # =========================================================================

    @app.get(
        "/api/v1/results",
        response_model=ResultsResponse,
        responses={500: {"model": ErrorResponse, "description": "Results file unreadable"}},
        tags=["Results"],
        summary="Get the ranked results table",
    )
    async def get_results(
        limit: Annotated[int, Query(description="Number of rows to return", ge=1, le=100)] = DEFAULT_RESULTS_LIMIT,
    ) -> Union[ResultsResponse, JSONResponse]:
        """
        Get the best results: fewest moves first, most recent first on ties.

        The file is re-read on every request, so newly finished games show
        up immediately.
        """
        try:
            repository = GameResultRepository.from_file(results_path)
        except (OSError, ValueError) as e:
            logger.warning("The results could not be loaded from {}: {}", results_path, e)
            return make_error_response(
                ErrorCode.RESULTS_UNAVAILABLE,
                "The results could not be loaded",
                status_code=500,
                details={"results_file": str(results_path)},
            )

        best = repository.find_best_results(limit)
        return ResultsResponse(
            results=[
                GameResultInfo(
                    rank=rank,
                    player_one=result.player_one,
                    player_two=result.player_two,
                    winner=result.winner,
                    number_of_moves=result.number_of_moves,
                    time_of_play=result.time_of_play,
                )
                for rank, result in enumerate(best, start=1)
            ],
            count=len(best),
            total=repository.size(),
        )

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers."""
        return HealthResponse(
            status="healthy",
            service="foxcatcher-results",
            version=__version__,
        )

    @app.get("/", tags=["System"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Fox Catcher Results API",
            "version": __version__,
            "environment": FOXCATCHER_ENV,
            "docs": "/api/docs",
            "health": "/health",
        }

    return app


# For running directly: uvicorn foxcatcher.api.app:app
app = create_app()
