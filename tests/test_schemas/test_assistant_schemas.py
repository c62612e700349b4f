"""
Tests for assistant schemas and lenient input parsing.
"""

import math

import pytest

from lifeline.schemas.assistant import (
    Gender,
    HealthData,
    HealthScoreRequest,
    Severity,
    UserProfile,
    parse_float,
    parse_int,
)


def test_severity_ordering():
    assert Severity.SEVERE.rank > Severity.MODERATE.rank > Severity.MILD.rank > Severity.UNKNOWN.rank


def test_severity_highest():
    levels = [Severity.MILD, Severity.SEVERE, Severity.MODERATE]
    assert Severity.highest(levels, default=Severity.MILD) == Severity.SEVERE
    assert Severity.highest([], default=Severity.UNKNOWN) == Severity.UNKNOWN


@pytest.mark.parametrize("value,expected", [
    (42, 42),
    ("42", 42),
    (" 42 years", 42),
    (42.9, 42),
    ("abc", None),
    ("", None),
    (None, None),
    (True, None),
    (math.nan, None),
    ([42], None),
])
def test_parse_int(value, expected):
    assert parse_int(value) == expected


@pytest.mark.parametrize("value,expected", [
    (7, 7.0),
    ("7.5", 7.5),
    ("8 hours", 8.0),
    (".5", 0.5),
    ("eight", None),
    (math.inf, None),
    (None, None),
])
def test_parse_float(value, expected):
    assert parse_float(value) == expected


def test_profile_accepts_camel_and_snake_case():
    camel = UserProfile.model_validate({"medicalHistory": ["asthma"]})
    snake = UserProfile.model_validate({"medical_history": ["asthma"]})

    assert camel.medical_history == snake.medical_history == ["asthma"]


def test_profile_negative_age_is_absent():
    assert UserProfile.model_validate({"age": -3}).age is None


@pytest.mark.parametrize("value,expected", [
    ("female", Gender.FEMALE),
    (" Male ", Gender.MALE),
    ("other", Gender.OTHER),
    ("prefer not to say", Gender.OTHER),
    ("", None),
    (None, None),
    (1, None),
])
def test_profile_gender(value, expected):
    assert UserProfile.model_validate({"gender": value}).gender == expected


def test_profile_history_entries_become_strings():
    profile = UserProfile.model_validate({"medicalHistory": ("diabetes", 7)})
    assert profile.medical_history == ["diabetes", "7"]


def test_health_data_rejects_negative_values():
    data = HealthData.model_validate({"exerciseFrequency": -2, "sleepHours": "-1"})

    assert data.exercise_frequency is None
    assert data.sleep_hours is None


def test_coerce_passes_models_through():
    profile = UserProfile(age=30)
    assert UserProfile.coerce(profile) is profile
    assert UserProfile.coerce("not a profile") == UserProfile()


def test_health_score_request_aliases():
    request = HealthScoreRequest.model_validate({
        "profile": {"age": 70},
        "healthData": {"sleepHours": 8}
    })

    assert request.profile.age == 70
    assert request.health_data.sleep_hours == 8.0
