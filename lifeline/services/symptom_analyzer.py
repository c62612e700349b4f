"""
Health Assistant Symptom Analyzer

Rule-based matcher that maps reported symptoms onto the symptom reference
table and aggregates severity, likely conditions and self-care advice.
"""

import re
from typing import Iterable, Optional, Union

from lifeline.core.logging import get_logger
from lifeline.schemas.assistant import Assessment, ConditionMatch, Severity
from lifeline.services.knowledge_base import (
    SymptomRecord,
    lookup_condition,
    lookup_symptom,
    normalize_symptom,
)

logger = get_logger(__name__)

MAX_CONDITIONS = 3

DISCLAIMER = (
    "This assessment is based on general medical knowledge and is not a substitute for "
    "professional medical advice, diagnosis, or treatment. Always seek the advice of your "
    "physician or other qualified health provider with any questions you may have regarding "
    "a medical condition."
)
SHORT_DISCLAIMER = "This is not a substitute for professional medical advice, diagnosis, or treatment."

EMPTY_MESSAGE = "Please describe your symptoms for an assessment."
EMPTY_RECOMMENDATION = "Describe your symptoms for personalized health advice."
UNRECOGNIZED_MESSAGE = (
    "We could not recognize the symptoms you described. Try common terms such as "
    "\"fever\" or \"chest pain\", or contact a healthcare provider if you are concerned."
)

SEVERITY_MESSAGES = {
    Severity.SEVERE: "You are experiencing severe symptoms that may require immediate medical attention.",
    Severity.MODERATE: "Your symptoms suggest a moderate condition that may benefit from medical evaluation.",
    Severity.MILD: "Your symptoms appear to be mild. Here are some recommendations for self-care.",
}

_SYMPTOM_SEPARATORS = re.compile(r"[,|\n]+")


def parse_symptom_text(text: Optional[str]) -> list[str]:
    """Split free text on commas, pipes and newlines into trimmed symptoms."""
    if not text:
        return []
    return [part.strip() for part in _SYMPTOM_SEPARATORS.split(text) if part.strip()]


class SymptomAnalyzer:
    """
    Symptom-to-condition reasoning engine.

    Stateless: every call works only on its arguments and the read-only
    reference tables, so one instance can serve concurrent callers.
    """

    def __init__(self):
        self._logger = logger

    def analyze(self, symptoms: Union[Iterable[str], str, None]) -> Assessment:
        """
        Assess a list of reported symptoms.

        Args:
            symptoms: Symptoms already split and trimmed by the caller.
                Unrecognised entries are skipped.

        Returns:
            Assessment with severity, top conditions and recommendations.
        """
        raw_symptoms = self._coerce_symptoms(symptoms)

        if not raw_symptoms:
            return Assessment(
                message=EMPTY_MESSAGE,
                severity=Severity.UNKNOWN,
                conditions=[],
                recommendations=[EMPTY_RECOMMENDATION],
                disclaimer=SHORT_DISCLAIMER,
            )

        matched: list[tuple[str, SymptomRecord]] = []
        unrecognized: list[str] = []
        for raw in raw_symptoms:
            record = lookup_symptom(raw)
            if record is None:
                unrecognized.append(raw)
            else:
                matched.append((normalize_symptom(raw), record))

        self._logger.debug(
            "Symptoms matched",
            extra={"matched": len(matched), "unrecognized": len(unrecognized)}
        )

        matched_keys = list(dict.fromkeys(key for key, _ in matched))

        if not matched:
            return Assessment(
                message=UNRECOGNIZED_MESSAGE,
                severity=Severity.UNKNOWN,
                conditions=[],
                recommendations=[],
                disclaimer=DISCLAIMER,
                symptoms_analyzed=raw_symptoms,
                matched_symptoms=[],
                unrecognized_symptoms=unrecognized,
            )

        records = [record for _, record in matched]
        severity = Severity.highest((r.severity for r in records), default=Severity.MILD)

        return Assessment(
            message=SEVERITY_MESSAGES.get(severity, SEVERITY_MESSAGES[Severity.MILD]),
            severity=severity,
            conditions=self._rank_conditions(records),
            recommendations=self._collect_recommendations(records),
            disclaimer=DISCLAIMER,
            symptoms_analyzed=raw_symptoms,
            matched_symptoms=matched_keys,
            unrecognized_symptoms=unrecognized,
        )

    def _coerce_symptoms(self, symptoms: Union[Iterable[str], str, None]) -> list[str]:
        if symptoms is None:
            return []
        if isinstance(symptoms, str):
            symptoms = [symptoms]
        entries = (s if isinstance(s, str) else str(s) for s in symptoms)
        # Blank entries carry no symptom and are dropped before analysis
        return [s for s in entries if s.strip()]

    def _collect_recommendations(self, records: list[SymptomRecord]) -> list[str]:
        """Concatenate advice in symptom order, keeping the first occurrence of each."""
        seen: dict[str, None] = {}
        for record in records:
            for recommendation in record.recommendations:
                seen.setdefault(recommendation, None)
        return list(seen)

    def _rank_conditions(self, records: list[SymptomRecord]) -> list[ConditionMatch]:
        """Count condition mentions and return the most frequent ones."""
        counts: dict[str, int] = {}
        for record in records:
            for condition in record.conditions:
                counts[condition] = counts.get(condition, 0) + 1

        # sorted() is stable, so ties keep first-encountered order
        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)

        matches = []
        for name, count in ranked[:MAX_CONDITIONS]:
            details = lookup_condition(name)
            if details is None:
                matches.append(ConditionMatch(name=name, matches=count))
                continue
            matches.append(ConditionMatch(
                name=name,
                matches=count,
                description=details.description,
                symptoms=list(details.symptoms),
                treatment=details.treatment,
                when_to_see_doctor=details.when_to_see_doctor,
            ))
        return matches


# Singleton instance
_analyzer_instance: Optional[SymptomAnalyzer] = None


def get_symptom_analyzer() -> SymptomAnalyzer:
    """Get or create the shared SymptomAnalyzer instance."""
    global _analyzer_instance
    if _analyzer_instance is None:
        _analyzer_instance = SymptomAnalyzer()
    return _analyzer_instance


def analyze_symptoms(symptoms: Union[Iterable[str], str, None]) -> Assessment:
    """Analyze symptoms with the shared analyzer."""
    return get_symptom_analyzer().analyze(symptoms)
