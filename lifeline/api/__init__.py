"""API routes for the LifeLine+ Health Assistant."""

from fastapi import APIRouter

from lifeline.api.v1 import assistant, health

# Create main API router
api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(assistant.router)

__all__ = ["api_router"]
