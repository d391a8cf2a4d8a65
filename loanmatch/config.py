"""Application configuration via pydantic-settings.

Settings are loaded from environment variables (.env file), organized into
logical groups and composed into a single Settings object.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RecommendationSettings(BaseSettings):
    """Tuning knobs for the recommendation engine."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", env_prefix="RECOMMENDATION_")

    term_years: int = Field(default=5, ge=1, description="Fixed loan term used for every offer")
    max_results: int = Field(default=5, ge=1, description="Maximum number of offers returned")
    min_match_score: int = Field(
        default=30,
        ge=0,
        le=100,
        description="Offers scoring at or below this are not viable",
    )
    match_score_weight: int = Field(
        default=1000,
        ge=0,
        description="Cost discount (kr) per match score point when ranking",
    )

    @property
    def term_months(self) -> int:
        """Number of monthly installments over the fixed term."""
        return self.term_years * 12


class ChatSettings(BaseSettings):
    """Conversational advisor settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", env_prefix="CHAT_")

    default_language: str = Field(default="no", description="Locale used when the profile has none")
    assistant_name: str = Field(default="FinanceGPT")
    session_idle_minutes: int = Field(default=30, ge=1, description="Idle sessions older than this are evicted")
    max_sessions: int = Field(default=10000, ge=1, description="Live session cap; creation beyond it is refused")

    @field_validator("default_language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Only Norwegian and English templates exist."""
        lowered = v.lower()
        if lowered not in {"no", "en"}:
            msg = f"Unsupported language: {v}. Must be 'no' or 'en'"
            raise ValueError(msg)
        return lowered


class AnalyticsSettings(BaseSettings):
    """In-process analytics buffer settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", env_prefix="ANALYTICS_")

    enabled: bool = Field(default=True)
    max_buffered_events: int = Field(default=100, ge=1, description="Ring buffer size")


class ServerSettings(BaseSettings):
    """HTTP host settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", env_prefix="SERVER_")

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)


class Settings(BaseSettings):
    """Root settings composing all sub-settings.

    Usage:
        settings = Settings()
        settings.recommendation.term_months
        settings.chat.default_language
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    recommendation: RecommendationSettings = Field(default_factory=RecommendationSettings)
    chat: ChatSettings = Field(default_factory=ChatSettings)
    analytics: AnalyticsSettings = Field(default_factory=AnalyticsSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


# Module-level singleton; import this wherever settings are needed.
settings = Settings()
