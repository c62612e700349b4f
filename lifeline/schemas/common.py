"""
Common schemas used across multiple endpoints.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    timestamp: datetime = Field(default_factory=_utcnow)

    class Config:
        json_schema_extra = {
            "example": {
                "error": "InternalServerError",
                "message": "An unexpected error occurred",
                "timestamp": "2024-01-15T10:30:00Z"
            }
        }


class HealthResponse(BaseModel):
    """Health check response."""

    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(default_factory=_utcnow)
    symptoms_indexed: int = Field(default=0, description="Symptoms in the knowledge base")
    conditions_indexed: int = Field(default=0, description="Conditions with reference entries")
    uptime_seconds: float = Field(default=0, description="Service uptime")

    class Config:
        json_schema_extra = {
            "example": {
                "service": "LifeLine+ Health Assistant",
                "version": "1.0.0",
                "status": "healthy",
                "timestamp": "2024-01-15T10:30:00Z",
                "symptoms_indexed": 10,
                "conditions_indexed": 5,
                "uptime_seconds": 3600.5
            }
        }
