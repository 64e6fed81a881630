"""
API Module - results table over HTTP.

Serves the ranked table of finished games recorded in the results
file. Read-only: no games are hosted or played through the API.
"""

from .schemas import (
    ErrorCode,
    ErrorResponse,
    GameResultInfo,
    HealthResponse,
    ResultsResponse,
)
from .app import create_app

__all__ = [
    "ErrorCode",
    "ErrorResponse",
    "GameResultInfo",
    "HealthResponse",
    "ResultsResponse",
    "create_app",
]
