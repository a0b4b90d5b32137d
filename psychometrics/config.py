"""
LLM Psychometrics — Application Configuration

Loads all configuration from environment variables (and an optional .env file)
using Pydantic Settings.  A cached ``get_settings()`` helper is provided so that
FastAPI dependency-injection (and any other call-site) always receives the same
validated instance without re-parsing the environment on every request.

Calibration constants are deliberately *not* settings; they live in
``psychometrics.scoring.calibration.CALIBRATION_PARAMS``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for the psychometric profiler."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------ #
    # OpenRouter (model provider)
    # ------------------------------------------------------------------ #
    OPENROUTER_API_KEY: str = ""
    OPENROUTER_BASE_URL: str = "https://openrouter.ai/api/v1"
    OPENROUTER_APP_TITLE: str = "AI Psychometric Profiler"
    OPENROUTER_REFERER: str = "http://localhost:3000"

    DEFAULT_TEMPERATURE: float = 0.7
    MAX_OUTPUT_TOKENS: int = 4096

    # ------------------------------------------------------------------ #
    # Retry / timeout policy for provider calls
    # ------------------------------------------------------------------ #
    REQUEST_TIMEOUT_SECONDS: float = 90.0
    MAX_RETRIES: int = 3             # retries after the first attempt
    BACKOFF_BASE_SECONDS: float = 1.0
    BACKOFF_MAX_SECONDS: float = 10.0
    BACKOFF_JITTER_SECONDS: float = 0.25

    # ------------------------------------------------------------------ #
    # Test administration
    # ------------------------------------------------------------------ #
    SAMPLES_PER_ITEM: int = 5
    ITEM_CHUNK_SIZE: int = 3
    ENABLE_CALIBRATION: bool = True
    DEFAULT_PERSONA: str = "Base Model"

    # ------------------------------------------------------------------ #
    # Database
    # ------------------------------------------------------------------ #
    DATABASE_URL: str = "sqlite+aiosqlite:///./psychometrics.db"
    RUN_QUERY_LIMIT: int = 1000

    # ------------------------------------------------------------------ #
    # Runtime environment
    # ------------------------------------------------------------------ #
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # ------------------------------------------------------------------ #
    # CORS
    # ------------------------------------------------------------------ #
    ALLOWED_ORIGINS: str = "*"

    # ------------------------------------------------------------------ #
    # Derived helpers
    # ------------------------------------------------------------------ #
    @property
    def allowed_origins_list(self) -> list[str]:
        """Return ALLOWED_ORIGINS as a list split on commas."""
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",")]

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @field_validator("SAMPLES_PER_ITEM", "ITEM_CHUNK_SIZE")
    @classmethod
    def _must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"Value must be at least 1, got {v}")
        return v

    @field_validator("DEFAULT_TEMPERATURE")
    @classmethod
    def _temperature_in_range(cls, v: float) -> float:
        if not 0.0 <= v <= 2.0:
            raise ValueError(f"Temperature must be between 0 and 2, got {v}")
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached, validated ``Settings`` instance.

    Using ``@lru_cache`` guarantees the .env file is read and validated
    exactly once per process lifetime::

        from psychometrics.config import get_settings
        settings = get_settings()
    """
    return Settings()
