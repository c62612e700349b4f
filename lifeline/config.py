"""
Configuration management for the LifeLine+ Health Assistant.
Uses pydantic-settings for type-safe environment variable handling.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "LifeLine+ Health Assistant"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Security
    ASSISTANT_API_KEY: str = ""
    FRONTEND_ORIGIN: str = "https://lifeline.app"

    # Request limits
    MAX_SYMPTOMS_PER_REQUEST: int = 20

    # Rate limiting
    RATE_LIMIT_REQUESTS: int = 100
    RATE_LIMIT_WINDOW: int = 60  # seconds

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
