"""
Health Assistant Health Scorer

Synthetic 0-100 health score built from profile and lifestyle rules, plus the
profile-driven general recommendations shown alongside it.
"""

import math
from typing import Any, Optional

from lifeline.core.logging import get_logger
from lifeline.schemas.assistant import (
    BreakdownEntry,
    Gender,
    HealthData,
    HealthScore,
    HealthStatus,
    UserProfile,
)

logger = get_logger(__name__)

BASE_SCORE = 100
MAX_HISTORY_DEDUCTION = 20
MAX_EXERCISE_BONUS = 10


# ============================================================================
# RECOMMENDATION RULES
# ============================================================================

SENIOR_RECOMMENDATIONS = (
    "Consider regular bone density screenings",
    "Stay up to date with pneumonia and flu vaccines",
    "Monitor blood pressure and cholesterol regularly",
)
MIDLIFE_RECOMMENDATIONS = (
    "Consider regular cancer screenings as recommended",
    "Maintain heart-healthy lifestyle",
    "Regular eye and dental checkups",
)
WELLNESS_RECOMMENDATIONS = (
    "Maintain a balanced diet and regular exercise",
    "Get adequate sleep (7-9 hours)",
    "Stay hydrated throughout the day",
)

GENDER_RECOMMENDATIONS = {
    Gender.FEMALE: (
        "Regular gynecological checkups",
        "Consider bone health and calcium intake",
    ),
    Gender.MALE: (
        "Regular prostate health screenings after age 50",
        "Monitor heart health",
    ),
}

# Checked in this order; each condition present in the history adds its group.
HISTORY_RECOMMENDATIONS = {
    "diabetes": (
        "Monitor blood sugar levels regularly",
        "Maintain a balanced diet low in refined sugars",
        "Regular foot examinations",
    ),
    "hypertension": (
        "Monitor blood pressure regularly",
        "Reduce sodium intake",
        "Regular cardiovascular exercise",
    ),
    "asthma": (
        "Keep inhaler accessible",
        "Avoid known triggers",
        "Regular pulmonary function tests",
    ),
}

LIFESTYLE_RECOMMENDATIONS = (
    "Regular physical activity (at least 150 minutes per week)",
    "Balanced diet rich in fruits and vegetables",
    "Adequate sleep (7-9 hours for most adults)",
    "Stay hydrated (8-10 glasses of water daily)",
    "Limit alcohol consumption",
    "Avoid smoking and secondhand smoke",
)


class HealthScorer:
    """
    Profile and lifestyle scoring engine.

    Rules never fail: a missing or unparsable field simply means the rule
    depending on it does not fire.
    """

    def __init__(self):
        self._logger = logger

    def recommendations(self, profile: Any) -> list[str]:
        """
        Build general recommendations for a profile.

        Groups are appended in a fixed order (age, gender, medical history,
        lifestyle) without deduplication.

        Args:
            profile: UserProfile or a mapping with profile fields.

        Returns:
            Recommendation strings; never fewer than the lifestyle group.
        """
        profile = UserProfile.coerce(profile)
        recommendations: list[str] = []

        if profile.age is not None:
            if profile.age >= 65:
                recommendations.extend(SENIOR_RECOMMENDATIONS)
            elif profile.age >= 40:
                recommendations.extend(MIDLIFE_RECOMMENDATIONS)
            else:
                recommendations.extend(WELLNESS_RECOMMENDATIONS)

        if profile.gender is not None:
            recommendations.extend(GENDER_RECOMMENDATIONS.get(profile.gender, ()))

        if profile.medical_history is not None:
            for condition, advice in HISTORY_RECOMMENDATIONS.items():
                if condition in profile.medical_history:
                    recommendations.extend(advice)

        recommendations.extend(LIFESTYLE_RECOMMENDATIONS)
        return recommendations

    def calculate(self, profile: Any, health_data: Any = None) -> HealthScore:
        """
        Calculate a bounded health score.

        Args:
            profile: UserProfile or a mapping with profile fields.
            health_data: HealthData or a mapping with lifestyle metrics.

        Returns:
            Score clamped to 0-100 with status, breakdown and recommendations.
        """
        profile = UserProfile.coerce(profile)
        health_data = HealthData.coerce(health_data)

        breakdown = [
            entry for entry in (
                self._age_factor(profile.age),
                self._history_factor(profile.medical_history),
                self._exercise_factor(health_data.exercise_frequency),
                self._sleep_factor(health_data.sleep_hours),
            )
            if entry is not None
        ]

        raw_score = BASE_SCORE + sum(entry.impact for entry in breakdown)
        score = max(0, min(100, raw_score))
        status = HealthStatus.from_score(score)

        self._logger.debug(
            "Health score calculated",
            extra={"score": score, "raw_score": raw_score, "factors": len(breakdown)}
        )

        return HealthScore(
            score=score,
            status=status,
            breakdown=breakdown,
            recommendations=self.recommendations(profile),
        )

    def _age_factor(self, age: Optional[int]) -> Optional[BreakdownEntry]:
        if age is None:
            return None
        if age > 65:
            return BreakdownEntry(factor="Age (65+)", impact=-10, reason="Increased health risks with age")
        if age > 40:
            return BreakdownEntry(factor="Age (40+)", impact=-5, reason="Moderate health risks with age")
        return None

    def _history_factor(self, history: Optional[list[str]]) -> Optional[BreakdownEntry]:
        if not history:
            return None
        deduction = min(len(history) * 5, MAX_HISTORY_DEDUCTION)
        return BreakdownEntry(
            factor="Medical History",
            impact=-deduction,
            reason=f"{len(history)} chronic condition(s) may impact overall health"
        )

    def _exercise_factor(self, frequency: Optional[float]) -> Optional[BreakdownEntry]:
        # Present-but-zero still produces an entry with no impact
        if frequency is None:
            return None
        # Partial sessions round down to whole points
        bonus = math.floor(min(frequency * 2, MAX_EXERCISE_BONUS))
        return BreakdownEntry(
            factor="Physical Activity",
            impact=bonus,
            reason="Regular exercise contributes positively to health"
        )

    def _sleep_factor(self, hours: Optional[float]) -> Optional[BreakdownEntry]:
        if hours is None:
            return None
        if 7 <= hours <= 9:
            impact = 5
        elif 6 <= hours < 7 or 9 < hours <= 10:
            impact = 2
        else:
            impact = -3
        return BreakdownEntry(
            factor="Sleep Quality",
            impact=impact,
            reason=f"{hours:g} hours of sleep per night"
        )


# Singleton instance
_scorer_instance: Optional[HealthScorer] = None


def get_health_scorer() -> HealthScorer:
    """Get or create the shared HealthScorer instance."""
    global _scorer_instance
    if _scorer_instance is None:
        _scorer_instance = HealthScorer()
    return _scorer_instance


def get_health_recommendations(profile: Any) -> list[str]:
    """Recommendations for a profile using the shared scorer."""
    return get_health_scorer().recommendations(profile)


def calculate_health_score(profile: Any, health_data: Any = None) -> HealthScore:
    """Health score for a profile using the shared scorer."""
    return get_health_scorer().calculate(profile, health_data)
