"""
Prometheus metrics for the Health Assistant.
"""

from prometheus_client import Counter

SYMPTOM_ASSESSMENTS = Counter(
    "lifeline_symptom_assessments_total",
    "Symptom assessments produced, by resulting severity",
    ["severity"],
)

HEALTH_SCORES = Counter(
    "lifeline_health_scores_total",
    "Health scores calculated, by resulting status",
    ["status"],
)

UNRECOGNIZED_SYMPTOMS = Counter(
    "lifeline_unrecognized_symptoms_total",
    "Submitted symptoms that did not match the knowledge base",
)
