"""
Symptom and condition reference data for the Health Assistant.

Both tables are built once at import time and exposed as read-only mappings.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from lifeline.schemas.assistant import Severity

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class SymptomRecord:
    """Conditions, intrinsic severity and advice attached to one symptom."""
    conditions: tuple[str, ...]
    severity: Severity
    recommendations: tuple[str, ...]


@dataclass(frozen=True)
class ConditionRecord:
    """Descriptive reference entry for a condition."""
    description: str
    symptoms: tuple[str, ...]
    treatment: str
    when_to_see_doctor: str


# ============================================================================
# SYMPTOM DATABASE
# ============================================================================

SYMPTOM_DATABASE: Mapping[str, SymptomRecord] = MappingProxyType({
    "fever": SymptomRecord(
        conditions=("flu", "common cold", "COVID-19", "infection"),
        severity=Severity.MODERATE,
        recommendations=(
            "Rest and stay hydrated",
            "Monitor temperature regularly",
            "Consider over-the-counter fever reducers",
            "Seek medical attention if fever exceeds 103°F (39.4°C)",
        ),
    ),
    "headache": SymptomRecord(
        conditions=("tension headache", "migraine", "sinusitis", "dehydration"),
        severity=Severity.MILD,
        recommendations=(
            "Rest in a quiet, dark room",
            "Stay hydrated",
            "Apply cold or warm compress",
            "Consider over-the-counter pain relievers",
        ),
    ),
    "chest_pain": SymptomRecord(
        conditions=("heart attack", "angina", "acid reflux", "muscle strain"),
        severity=Severity.SEVERE,
        recommendations=(
            "Seek immediate medical attention if severe",
            "Do not drive yourself to the hospital",
            "Call emergency services (911)",
            "Take aspirin if not allergic",
        ),
    ),
    "shortness_of_breath": SymptomRecord(
        conditions=("asthma", "COPD", "heart failure", "pulmonary embolism"),
        severity=Severity.SEVERE,
        recommendations=(
            "Sit upright and try to remain calm",
            "Use prescribed inhaler if available",
            "Seek immediate medical attention if severe",
            "Call emergency services if breathing becomes very difficult",
        ),
    ),
    "abdominal_pain": SymptomRecord(
        conditions=("appendicitis", "food poisoning", "ulcers", "gallstones"),
        severity=Severity.MODERATE,
        recommendations=(
            "Monitor pain location and intensity",
            "Avoid solid foods if severe",
            "Stay hydrated",
            "Seek medical attention if pain worsens or persists",
        ),
    ),
    "joint_pain": SymptomRecord(
        conditions=("arthritis", "injury", "gout", "inflammation"),
        severity=Severity.MILD,
        recommendations=(
            "Rest the affected joint",
            "Apply ice for acute injuries",
            "Consider anti-inflammatory medication",
            "Gentle stretching exercises",
        ),
    ),
    "nausea": SymptomRecord(
        conditions=("food poisoning", "pregnancy", "migraine", "medication side effect"),
        severity=Severity.MILD,
        recommendations=(
            "Stay hydrated with small sips of water",
            "Avoid solid foods until nausea passes",
            "Try ginger tea or crackers",
            "Rest and avoid strong odors",
        ),
    ),
    "fatigue": SymptomRecord(
        conditions=("anemia", "depression", "sleep disorder", "thyroid issues"),
        severity=Severity.MILD,
        recommendations=(
            "Ensure adequate sleep (7-9 hours)",
            "Maintain a balanced diet",
            "Regular exercise",
            "Manage stress levels",
        ),
    ),
    "cough": SymptomRecord(
        conditions=("common cold", "bronchitis", "asthma", "COVID-19"),
        severity=Severity.MILD,
        recommendations=(
            "Stay hydrated",
            "Use a humidifier",
            "Honey for soothing throat",
            "Avoid irritants like smoke",
        ),
    ),
    "dizziness": SymptomRecord(
        conditions=("dehydration", "low blood pressure", "inner ear issues", "medication side effect"),
        severity=Severity.MODERATE,
        recommendations=(
            "Sit or lie down immediately",
            "Stay hydrated",
            "Avoid sudden movements",
            "Seek medical attention if persistent or severe",
        ),
    ),
})


# ============================================================================
# CONDITION DATABASE
# ============================================================================

# Not every condition named above has an entry here.
CONDITION_DATABASE: Mapping[str, ConditionRecord] = MappingProxyType({
    "flu": ConditionRecord(
        description="Influenza is a viral infection that attacks your respiratory system.",
        symptoms=("fever", "cough", "sore throat", "runny nose", "body aches", "fatigue"),
        treatment="Rest, fluids, over-the-counter medications for symptom relief",
        when_to_see_doctor="If symptoms worsen after a week, difficulty breathing, high fever",
    ),
    "common_cold": ConditionRecord(
        description="A viral infection of your nose and throat (upper respiratory tract).",
        symptoms=("runny nose", "sore throat", "cough", "mild fever", "sneezing"),
        treatment="Rest, fluids, over-the-counter cold medications",
        when_to_see_doctor="If symptoms persist beyond 10 days, high fever, severe headache",
    ),
    "COVID-19": ConditionRecord(
        description="A contagious disease caused by the SARS-CoV-2 virus.",
        symptoms=("fever", "cough", "shortness_of_breath", "loss_of_taste_or_smell", "fatigue"),
        treatment="Rest, fluids, follow CDC guidelines for isolation",
        when_to_see_doctor="Difficulty breathing, persistent chest pain, confusion, bluish lips",
    ),
    "heart_attack": ConditionRecord(
        description="Occurs when blood flow to part of the heart is blocked.",
        symptoms=("chest_pain", "shortness_of_breath", "nausea", "cold_sweat", "lightheadedness"),
        treatment="Immediate emergency medical attention required",
        when_to_see_doctor="Immediately - call 911",
    ),
    "migraine": ConditionRecord(
        description="A neurological condition characterized by intense headaches.",
        symptoms=("headache", "nausea", "sensitivity_to_light", "sensitivity_to_sound"),
        treatment="Prescription medications, rest in dark room, avoid triggers",
        when_to_see_doctor="If headaches become more frequent or severe, new neurological symptoms",
    ),
})


def normalize_symptom(symptom: str) -> str:
    """Turn free text such as ``"Chest  Pain"`` into a table key (``chest_pain``)."""
    return _WHITESPACE.sub("_", symptom.strip().lower())


def normalize_condition(name: str) -> str:
    """Condition keys keep their case; only whitespace runs become underscores."""
    return _WHITESPACE.sub("_", name)


def lookup_symptom(symptom: str) -> Optional[SymptomRecord]:
    """Find the record for a raw symptom string, or ``None`` if unknown."""
    return SYMPTOM_DATABASE.get(normalize_symptom(symptom))


def lookup_condition(name: str) -> Optional[ConditionRecord]:
    """Find the reference entry for a condition name, or ``None`` if absent."""
    return CONDITION_DATABASE.get(normalize_condition(name))
