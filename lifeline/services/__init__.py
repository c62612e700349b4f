"""Services for the LifeLine+ Health Assistant."""

from lifeline.services.symptom_analyzer import (
    SymptomAnalyzer,
    analyze_symptoms,
    get_symptom_analyzer,
    parse_symptom_text,
)
from lifeline.services.health_scorer import (
    HealthScorer,
    calculate_health_score,
    get_health_recommendations,
    get_health_scorer,
)

__all__ = [
    "SymptomAnalyzer",
    "analyze_symptoms",
    "get_symptom_analyzer",
    "parse_symptom_text",
    "HealthScorer",
    "calculate_health_score",
    "get_health_recommendations",
    "get_health_scorer",
]
