"""
Application configuration.

Centralized environment-based settings using Pydantic v2.
"""

from functools import lru_cache
from typing import Optional

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # --------------------
    # Environment
    # --------------------
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # --------------------
    # Database
    # --------------------
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB: str = "sixfactors"
    MONGO_TLS: bool = False
    ANSWERS_COLLECTION: str = "sixfactors_answers"

    # --------------------
    # Questionnaire
    # --------------------
    DEFAULT_LANG: str = "en"
    # Off: every locale resolves to DEFAULT_LANG.
    LOCALE_LANGUAGE_ENABLED: bool = False
    # On: unknown answer phrases are rejected instead of stored as null.
    STRICT_ANSWERS: bool = False

    # --------------------
    # Error tracking
    # --------------------
    SENTRY_DSN: Optional[str] = None

    model_config = ConfigDict(
        env_file=".env",
        env_prefix="SIXFACTORS_",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Return the process-wide settings instance.

    Used as a FastAPI dependency so tests can override it.
    """
    return Settings()
