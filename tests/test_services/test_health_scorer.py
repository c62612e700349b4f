"""
Tests for health score calculation and recommendations.
"""

import pytest

from lifeline.schemas.assistant import HealthData, HealthStatus, UserProfile
from lifeline.services.health_scorer import (
    LIFESTYLE_RECOMMENDATIONS,
    HealthScorer,
    calculate_health_score,
    get_health_recommendations,
)


def _factors(result):
    return [(entry.factor, entry.impact) for entry in result.breakdown]


def test_senior_with_chronic_conditions(scorer: HealthScorer):
    result = scorer.calculate(
        {"age": 70, "medicalHistory": ["diabetes", "hypertension", "asthma"]},
        {}
    )

    assert result.score == 75
    assert result.status == HealthStatus.GOOD
    assert _factors(result) == [("Age (65+)", -10), ("Medical History", -15)]


def test_score_is_clamped_to_100(scorer: HealthScorer):
    result = scorer.calculate({"age": 30}, {"sleepHours": "8"})

    assert result.score == 100
    assert result.status == HealthStatus.EXCELLENT
    assert _factors(result) == [("Sleep Quality", 5)]


def test_empty_inputs_score_perfect(scorer: HealthScorer):
    result = scorer.calculate({})

    assert result.score == 100
    assert result.breakdown == []
    assert result.recommendations == list(LIFESTYLE_RECOMMENDATIONS)


@pytest.mark.parametrize("age,expected", [
    (66, [("Age (65+)", -10)]),
    (65, [("Age (40+)", -5)]),
    (41, [("Age (40+)", -5)]),
    (40, []),
    (18, []),
])
def test_age_thresholds_are_strict(scorer: HealthScorer, age, expected):
    assert _factors(scorer.calculate({"age": age})) == expected


def test_medical_history_deduction_is_capped(scorer: HealthScorer):
    result = scorer.calculate({"medicalHistory": ["a", "b", "c", "d", "e", "f"]})

    assert _factors(result) == [("Medical History", -20)]
    assert result.breakdown[0].reason == "6 chronic condition(s) may impact overall health"


def test_empty_medical_history_has_no_entry(scorer: HealthScorer):
    assert scorer.calculate({"medicalHistory": []}).breakdown == []


@pytest.mark.parametrize("frequency,impact", [
    (0, 0),
    (0.25, 0),
    (0.75, 1),
    (1.25, 2),
    (1.75, 3),
    (2, 4),
    (2.25, 4),
    (4.75, 9),
    (5, 10),
    (12, 10),
])
def test_exercise_bonus(scorer: HealthScorer, frequency, impact):
    result = scorer.calculate({}, {"exerciseFrequency": frequency})
    assert _factors(result) == [("Physical Activity", impact)]


@pytest.mark.parametrize("hours,impact", [
    (7, 5),
    (9, 5),
    (6, 2),
    (6.5, 2),
    (9.5, 2),
    (10, 2),
    (5.5, -3),
    (11, -3),
    (0, -3),
])
def test_sleep_quality(scorer: HealthScorer, hours, impact):
    result = scorer.calculate({}, {"sleepHours": hours})
    assert _factors(result) == [("Sleep Quality", impact)]


def test_sleep_reason_mentions_hours(scorer: HealthScorer):
    result = scorer.calculate({}, HealthData(sleep_hours=7.5))
    assert result.breakdown[0].reason == "7.5 hours of sleep per night"


def test_rules_applied_in_fixed_order(scorer: HealthScorer):
    result = scorer.calculate(
        {"age": 50, "medicalHistory": ["asthma"]},
        {"exerciseFrequency": 3, "sleepHours": 5}
    )

    assert [entry.factor for entry in result.breakdown] == [
        "Age (40+)", "Medical History", "Physical Activity", "Sleep Quality",
    ]
    assert result.score == 100 - 5 - 5 + 6 - 3


@pytest.mark.parametrize("score,status", [
    (100, HealthStatus.EXCELLENT),
    (80, HealthStatus.EXCELLENT),
    (79, HealthStatus.GOOD),
    (60, HealthStatus.GOOD),
    (59, HealthStatus.FAIR),
    (40, HealthStatus.FAIR),
    (39, HealthStatus.POOR),
    (0, HealthStatus.POOR),
])
def test_status_bands(score, status):
    assert HealthStatus.from_score(score) == status


def test_score_always_within_bounds(scorer: HealthScorer):
    profiles = [{}, {"age": 90, "medicalHistory": list("abcdefgh")}, {"age": 20}]
    health_data = [{}, {"exerciseFrequency": 100, "sleepHours": 8}, {"sleepHours": 2}]

    for profile in profiles:
        for data in health_data:
            assert 0 <= scorer.calculate(profile, data).score <= 100


def test_malformed_fields_do_not_fire(scorer: HealthScorer):
    result = scorer.calculate(
        {"age": "unknown", "gender": 42, "medicalHistory": "diabetes"},
        {"exerciseFrequency": "often", "sleepHours": "plenty"}
    )

    assert result.score == 100
    assert result.breakdown == []
    assert result.recommendations == list(LIFESTYLE_RECOMMENDATIONS)


def test_numeric_strings_are_parsed(scorer: HealthScorer):
    result = scorer.calculate({"age": "70 years"}, {"exerciseFrequency": "2"})
    assert _factors(result) == [("Age (65+)", -10), ("Physical Activity", 4)]


def test_non_mapping_inputs_are_treated_as_empty(scorer: HealthScorer):
    result = scorer.calculate(None, ["not", "a", "mapping"])
    assert result.score == 100
    assert result.breakdown == []


def test_score_includes_profile_recommendations(scorer: HealthScorer):
    profile = UserProfile(age=45, gender="male")
    result = scorer.calculate(profile)

    assert result.recommendations == scorer.recommendations(profile)


# ============================================================================
# Recommendations
# ============================================================================

def test_lifestyle_recommendations_always_present(scorer: HealthScorer):
    assert scorer.recommendations({}) == list(LIFESTYLE_RECOMMENDATIONS)
    assert len(LIFESTYLE_RECOMMENDATIONS) == 6


@pytest.mark.parametrize("age,first", [
    (65, "Consider regular bone density screenings"),
    (64, "Consider regular cancer screenings as recommended"),
    (40, "Consider regular cancer screenings as recommended"),
    (39, "Maintain a balanced diet and regular exercise"),
    (0, "Maintain a balanced diet and regular exercise"),
])
def test_age_brackets(scorer: HealthScorer, age, first):
    recommendations = scorer.recommendations({"age": age})

    assert recommendations[0] == first
    assert len(recommendations) == 3 + 6


def test_gender_is_case_insensitive(scorer: HealthScorer):
    assert scorer.recommendations({"gender": "FEMALE"})[:2] == [
        "Regular gynecological checkups",
        "Consider bone health and calcium intake",
    ]
    assert scorer.recommendations({"gender": "Male"})[:2] == [
        "Regular prostate health screenings after age 50",
        "Monitor heart health",
    ]


def test_unrecognized_gender_adds_nothing(scorer: HealthScorer):
    assert scorer.recommendations({"gender": "nonbinary"}) == list(LIFESTYLE_RECOMMENDATIONS)


def test_groups_combine_without_deduplication(scorer: HealthScorer):
    recommendations = scorer.recommendations({
        "age": 70,
        "gender": "female",
        "medicalHistory": ["asthma", "gout", "diabetes"],
    })

    assert len(recommendations) == 3 + 2 + 3 + 3 + 6
    # History groups follow the fixed rule order, not the history order
    diabetes_at = recommendations.index("Monitor blood sugar levels regularly")
    asthma_at = recommendations.index("Keep inhaler accessible")
    assert diabetes_at < asthma_at
    assert recommendations[-6:] == list(LIFESTYLE_RECOMMENDATIONS)


def test_module_level_functions():
    assert get_health_recommendations({}) == list(LIFESTYLE_RECOMMENDATIONS)
    assert calculate_health_score({"age": 50}).score == 95
