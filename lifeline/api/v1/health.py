"""
Health check and monitoring endpoints.
"""

import time

from fastapi import APIRouter
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from lifeline.config import get_settings
from lifeline.schemas.common import HealthResponse
from lifeline.services.knowledge_base import CONDITION_DATABASE, SYMPTOM_DATABASE

router = APIRouter()

# Track startup time
_startup_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Report service status and knowledge base size.

    No authentication required for health checks.
    """
    settings = get_settings()

    return HealthResponse(
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
        status="healthy",
        symptoms_indexed=len(SYMPTOM_DATABASE),
        conditions_indexed=len(CONDITION_DATABASE),
        uptime_seconds=time.time() - _startup_time
    )


@router.get("/metrics")
async def prometheus_metrics():
    """
    Expose Prometheus metrics.

    No authentication for metrics endpoint.
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )
