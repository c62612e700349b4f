"""API v1 routes."""

from lifeline.api.v1 import assistant, health

__all__ = ["assistant", "health"]
