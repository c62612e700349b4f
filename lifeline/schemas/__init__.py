"""Pydantic schemas for request/response validation."""

from lifeline.schemas.common import (
    ErrorResponse,
    HealthResponse,
)
from lifeline.schemas.assistant import (
    # Enums
    Severity,
    Gender,
    HealthStatus,
    # Inputs
    UserProfile,
    HealthData,
    # Symptom assessment
    ConditionMatch,
    Assessment,
    # Health score
    BreakdownEntry,
    HealthScore,
    # Requests / responses
    SymptomCheckRequest,
    HealthScoreRequest,
    RecommendationsResponse,
    KnownSymptom,
    KnowledgeBaseResponse,
)

__all__ = [
    # Common
    "ErrorResponse",
    "HealthResponse",
    # Enums
    "Severity",
    "Gender",
    "HealthStatus",
    # Inputs
    "UserProfile",
    "HealthData",
    # Symptom assessment
    "ConditionMatch",
    "Assessment",
    # Health score
    "BreakdownEntry",
    "HealthScore",
    # Requests / responses
    "SymptomCheckRequest",
    "HealthScoreRequest",
    "RecommendationsResponse",
    "KnownSymptom",
    "KnowledgeBaseResponse",
]
