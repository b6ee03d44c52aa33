"""
ColorScore API Schemas
Pydantic models for harmony scoring request/response validation.
"""
from typing import Annotated, Any, Dict, List

from pydantic import BaseModel, Field

Channel = Annotated[int, Field(ge=0, le=255)]


class ScoreResponse(BaseModel):
    """Harmony score and the dominant colors it was computed from."""
    score: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        description="Color harmony score (0-100), rounded to 2 decimal places"
    )
    colors: List[List[Channel]] = Field(
        ...,
        description="Dominant colors as [r, g, b] integer triples (0-255)"
    )


class ErrorResponse(BaseModel):
    """Error response."""
    error: str = Field(..., description="Error message")


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = Field(True, description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field("colorscore", description="Service name")


class MetricsResponse(BaseModel):
    """In-process metrics summary."""
    uptime_seconds: float
    counters: Dict[str, int]
    timing_stats: Dict[str, Dict[str, float]]
    score_stats: Dict[str, Any]
