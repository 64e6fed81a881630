"""
Pydantic Schemas for API - request/response models for the results table.

Error Codes:
- RESULTS_UNAVAILABLE: The results file exists but could not be read
- VALIDATION_ERROR: A query parameter is out of range
"""

from datetime import datetime
from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class ErrorCode(str, Enum):
    """Structured error codes."""
    RESULTS_UNAVAILABLE = "RESULTS_UNAVAILABLE"
    VALIDATION_ERROR = "VALIDATION_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class GameResultInfo(BaseModel):
    """One row of the results table."""
    rank: int = Field(..., ge=1, description="Position in the table, 1 is best")
    player_one: str = Field(..., description="Player controlling the dogs")
    player_two: str = Field(..., description="Player controlling the fox")
    winner: str
    number_of_moves: int = Field(..., ge=0)
    time_of_play: datetime

    model_config = {"from_attributes": True}


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class ResultsResponse(BaseModel):
    """The ranked results table."""
    results: list[GameResultInfo] = Field(default_factory=list)
    count: int = 0
    total: int = Field(0, description="Number of recorded games")


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
