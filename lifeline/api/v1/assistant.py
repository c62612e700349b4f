"""
Health Assistant API Endpoints

Symptom checking, health scoring and general recommendations.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, status

from lifeline.config import get_settings
from lifeline.core.auth import verify_api_key
from lifeline.core.logging import get_logger
from lifeline.core.metrics import HEALTH_SCORES, SYMPTOM_ASSESSMENTS, UNRECOGNIZED_SYMPTOMS
from lifeline.core.rate_limit import get_rate_limit_string, limiter
from lifeline.schemas.assistant import (
    Assessment,
    HealthScore,
    HealthScoreRequest,
    KnowledgeBaseResponse,
    KnownSymptom,
    RecommendationsResponse,
    SymptomCheckRequest,
    UserProfile,
)
from lifeline.services.health_scorer import get_health_scorer
from lifeline.services.knowledge_base import CONDITION_DATABASE, SYMPTOM_DATABASE
from lifeline.services.symptom_analyzer import get_symptom_analyzer, parse_symptom_text

logger = get_logger(__name__)

router = APIRouter(
    prefix="/assistant",
    tags=["assistant"],
    dependencies=[Depends(verify_api_key)]
)


# ============================================================================
# SYMPTOM CHECKER
# ============================================================================

@router.post(
    "/symptoms",
    response_model=Assessment,
    response_model_exclude_none=True,
    summary="Check Symptoms",
    description="""
    Rule-based symptom assessment.

    Symptoms may be sent as a list, as free text separated by commas, pipes or
    newlines, or both. Returns the highest severity among recognised symptoms,
    up to three likely conditions and deduplicated self-care advice.
    """
)
@limiter.limit(get_rate_limit_string())
async def check_symptoms(request: Request, payload: SymptomCheckRequest) -> Assessment:
    """
    Assess reported symptoms.

    Args:
        request: Incoming request (used for rate limiting).
        payload: Symptoms as a list and/or free text.

    Returns:
        Assessment with severity, conditions and recommendations.
    """
    symptoms = [s.strip() for s in payload.symptoms if s.strip()]
    symptoms.extend(parse_symptom_text(payload.text))

    max_symptoms = get_settings().MAX_SYMPTOMS_PER_REQUEST
    if len(symptoms) > max_symptoms:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Maximum {max_symptoms} symptoms can be analyzed at once"
        )

    try:
        logger.info(f"Symptom check requested for {len(symptoms)} symptoms")

        result = get_symptom_analyzer().analyze(symptoms)

        SYMPTOM_ASSESSMENTS.labels(severity=result.severity.value).inc()
        if result.unrecognized_symptoms:
            UNRECOGNIZED_SYMPTOMS.inc(len(result.unrecognized_symptoms))

        logger.info(
            "Symptom check complete",
            extra={
                "severity": result.severity.value,
                "conditions_found": len(result.conditions),
                "unrecognized": len(result.unrecognized_symptoms)
            }
        )

        return result

    except Exception as e:
        logger.error(f"Symptom check failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to analyze symptoms"
        )


# ============================================================================
# HEALTH SCORE
# ============================================================================

@router.post(
    "/health-score",
    response_model=HealthScore,
    summary="Calculate Health Score",
    description="""
    Synthetic 0-100 health score from age, medical history, exercise frequency
    and sleep, with a per-factor breakdown and general recommendations.
    """
)
@limiter.limit(get_rate_limit_string())
async def health_score(request: Request, payload: HealthScoreRequest) -> HealthScore:
    """
    Calculate a health score for a profile.

    Args:
        request: Incoming request (used for rate limiting).
        payload: Profile and optional lifestyle metrics.

    Returns:
        Score, status, breakdown and recommendations.
    """
    try:
        result = get_health_scorer().calculate(payload.profile, payload.health_data)

        HEALTH_SCORES.labels(status=result.status.value).inc()
        logger.info(
            "Health score calculated",
            extra={"score": result.score, "status": result.status.value}
        )

        return result

    except Exception as e:
        logger.error(f"Health score calculation failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to calculate health score"
        )


@router.post(
    "/recommendations",
    response_model=RecommendationsResponse,
    summary="Get Health Recommendations"
)
@limiter.limit(get_rate_limit_string())
async def health_recommendations(request: Request, profile: UserProfile) -> RecommendationsResponse:
    """General recommendations for a profile."""
    try:
        recommendations = get_health_scorer().recommendations(profile)
    except Exception as e:
        logger.error(f"Recommendation generation failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate recommendations"
        )
    return RecommendationsResponse(recommendations=recommendations)


# ============================================================================
# KNOWLEDGE BASE
# ============================================================================

@router.get(
    "/knowledge-base",
    response_model=KnowledgeBaseResponse,
    summary="List Known Symptoms and Conditions"
)
@limiter.limit(get_rate_limit_string())
async def knowledge_base(request: Request):
    """Symptom keys with their severity, and conditions with reference entries."""
    return KnowledgeBaseResponse(
        symptoms=[
            KnownSymptom(key=key, severity=record.severity, conditions=list(record.conditions))
            for key, record in SYMPTOM_DATABASE.items()
        ],
        conditions=list(CONDITION_DATABASE)
    )
