"""
Health Assistant Schemas

Pydantic models for symptom assessments, health scores and the loosely-shaped
user profile / lifestyle inputs they are computed from.
"""

import math
import re
from collections.abc import Mapping
from enum import Enum
from typing import Any, Iterable, Optional

from pydantic import BaseModel, Field, field_validator


# ============================================================================
# ENUMS
# ============================================================================

class Severity(str, Enum):
    """Ordered severity tiers. ``UNKNOWN`` ranks below every real tier."""
    UNKNOWN = "unknown"
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]

    @classmethod
    def highest(cls, levels: Iterable["Severity"], default: "Severity") -> "Severity":
        """Return the most severe level in ``levels``, or ``default`` if empty."""
        return max(levels, key=lambda level: level.rank, default=default)


_SEVERITY_RANK = {
    Severity.UNKNOWN: 0,
    Severity.MILD: 1,
    Severity.MODERATE: 2,
    Severity.SEVERE: 3,
}


class Gender(str, Enum):
    """Recognised profile genders. Any other non-empty value maps to OTHER."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class HealthStatus(str, Enum):
    """Health score bands."""
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"

    @classmethod
    def from_score(cls, score: int) -> "HealthStatus":
        if score >= 80:
            return cls.EXCELLENT
        if score >= 60:
            return cls.GOOD
        if score >= 40:
            return cls.FAIR
        return cls.POOR


# ============================================================================
# LENIENT PARSING
# ============================================================================

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_int(value: Any) -> Optional[int]:
    """Parse the leading integer of ``value``; ``None`` when there is none.

    ``"42"``, ``"42 years"``, ``42.9`` all give 42.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _INT_PREFIX.match(value)
        return int(match.group(1)) if match else None
    return None


def parse_float(value: Any) -> Optional[float]:
    """Parse the leading decimal number of ``value``; ``None`` when there is none."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _FLOAT_PREFIX.match(value)
        if not match:
            return None
        number = float(match.group(1))
    else:
        return None
    return number if math.isfinite(number) else None


# ============================================================================
# PROFILE INPUTS
# ============================================================================

class UserProfile(BaseModel):
    """User profile fields that drive scoring and recommendations.

    Every field is optional and parsed leniently: a value that cannot be
    understood is stored as ``None`` so the rules depending on it do not fire.
    """
    age: Optional[int] = Field(None, description="Age in years")
    gender: Optional[Gender] = Field(None, description="male, female or other")
    medical_history: Optional[list[str]] = Field(
        None,
        alias="medicalHistory",
        description="Known chronic conditions",
    )

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "age": 52,
                "gender": "female",
                "medicalHistory": ["hypertension"]
            }
        }

    @field_validator("age", mode="before")
    @classmethod
    def validate_age(cls, value: Any) -> Optional[int]:
        age = parse_int(value)
        if age is None or age < 0:
            return None
        return age

    @field_validator("gender", mode="before")
    @classmethod
    def validate_gender(cls, value: Any) -> Optional[Gender]:
        if isinstance(value, Gender):
            return value
        if not isinstance(value, str) or not value.strip():
            return None
        normalized = value.strip().lower()
        if normalized == Gender.FEMALE.value:
            return Gender.FEMALE
        if normalized == Gender.MALE.value:
            return Gender.MALE
        return Gender.OTHER

    @field_validator("medical_history", mode="before")
    @classmethod
    def validate_history(cls, value: Any) -> Optional[list[str]]:
        if not isinstance(value, (list, tuple)):
            return None
        return [item if isinstance(item, str) else str(item) for item in value]

    @classmethod
    def coerce(cls, value: Any) -> "UserProfile":
        """Build a profile from a model, a mapping, or anything else (empty)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        return cls()


class HealthData(BaseModel):
    """Tracked lifestyle metrics."""
    exercise_frequency: Optional[float] = Field(
        None,
        alias="exerciseFrequency",
        description="Exercise sessions per week",
    )
    sleep_hours: Optional[float] = Field(
        None,
        alias="sleepHours",
        description="Average hours of sleep per night",
    )

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "exerciseFrequency": 3,
                "sleepHours": 7.5
            }
        }

    @field_validator("exercise_frequency", "sleep_hours", mode="before")
    @classmethod
    def validate_metric(cls, value: Any) -> Optional[float]:
        number = parse_float(value)
        if number is None or number < 0:
            return None
        return number

    @classmethod
    def coerce(cls, value: Any) -> "HealthData":
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        return cls()


# ============================================================================
# SYMPTOM ASSESSMENT
# ============================================================================

class ConditionMatch(BaseModel):
    """Condition ranked by how many reported symptoms point to it.

    Descriptive fields are only present when the condition has a reference entry.
    """
    name: str = Field(..., description="Condition name")
    matches: int = Field(..., ge=1, description="Number of matching symptoms")
    description: Optional[str] = None
    symptoms: Optional[list[str]] = None
    treatment: Optional[str] = None
    when_to_see_doctor: Optional[str] = None


class Assessment(BaseModel):
    """Structured result of a symptom check."""
    message: str = Field(..., description="Summary chosen by severity")
    severity: Severity = Field(..., description="Highest severity among matched symptoms")
    conditions: list[ConditionMatch] = Field(default_factory=list, description="Top conditions")
    recommendations: list[str] = Field(default_factory=list, description="Deduplicated advice")
    disclaimer: str = Field(..., description="Medical disclaimer")
    symptoms_analyzed: list[str] = Field(default_factory=list, description="Symptoms as submitted")
    matched_symptoms: list[str] = Field(default_factory=list, description="Recognised symptom keys")
    unrecognized_symptoms: list[str] = Field(default_factory=list, description="Symptoms not in the knowledge base")


# ============================================================================
# HEALTH SCORE
# ============================================================================

class BreakdownEntry(BaseModel):
    """One scoring rule's contribution."""
    factor: str
    impact: int
    reason: str


class HealthScore(BaseModel):
    """Bounded health score with the rules that produced it."""
    score: int = Field(..., ge=0, le=100, description="Health score 0-100")
    status: HealthStatus = Field(..., description="Score band")
    breakdown: list[BreakdownEntry] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


# ============================================================================
# REQUEST / RESPONSE MODELS
# ============================================================================

class SymptomCheckRequest(BaseModel):
    """Request model for a symptom check.

    ``symptoms`` are used as given; ``text`` is free text split on commas,
    pipes and newlines. Both may be combined.
    """
    symptoms: list[str] = Field(default_factory=list, description="Individual symptoms")
    text: Optional[str] = Field(None, description="Free-text symptom description")

    class Config:
        json_schema_extra = {
            "example": {
                "symptoms": ["fever"],
                "text": "headache, chest pain"
            }
        }


class HealthScoreRequest(BaseModel):
    """Request model for health score calculation."""
    profile: UserProfile = Field(default_factory=UserProfile)
    health_data: HealthData = Field(default_factory=HealthData, alias="healthData")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "profile": {"age": 70, "medicalHistory": ["diabetes"]},
                "healthData": {"exerciseFrequency": 3, "sleepHours": 8}
            }
        }


class RecommendationsResponse(BaseModel):
    recommendations: list[str]


class KnownSymptom(BaseModel):
    key: str
    severity: Severity
    conditions: list[str]


class KnowledgeBaseResponse(BaseModel):
    """Symptoms and conditions the assistant can reason about."""
    symptoms: list[KnownSymptom]
    conditions: list[str]
