"""Core modules for the LifeLine+ Health Assistant."""

from lifeline.core.auth import verify_api_key
from lifeline.core.logging import get_logger, setup_logging
from lifeline.core.rate_limit import limiter, get_rate_limit_string

__all__ = [
    "verify_api_key",
    "get_logger",
    "setup_logging",
    "limiter",
    "get_rate_limit_string",
]
