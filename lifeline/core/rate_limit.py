"""
Rate limiting configuration using SlowAPI.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from lifeline.config import get_settings


def _get_rate_limit_key(request: Request) -> str:
    """
    Key requests by API key prefix when present, otherwise by client address.
    """
    api_key = request.headers.get("X-API-Key")
    if api_key:
        return f"api_key:{api_key[:8]}..."
    return get_remote_address(request)


def get_rate_limit_string() -> str:
    """Rate limit in slowapi notation, e.g. ``100/60 seconds``."""
    settings = get_settings()
    return f"{settings.RATE_LIMIT_REQUESTS}/{settings.RATE_LIMIT_WINDOW} seconds"


limiter = Limiter(
    key_func=_get_rate_limit_key,
    default_limits=[get_rate_limit_string()]
)
