"""
Configuration management for acrating.

Uses Pydantic Settings to load configuration from environment variables
(prefixed with ACRATING_) with sensible defaults. The rating engine itself
takes plain arguments; these settings feed the script and the history
cache.

Usage:
    from acrating.config import settings
    print(settings.search_iterations)
"""

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from acrating.rating.constants import SEARCH_DEFAULTS


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Environment variables can be set directly or via a .env file
    in the project root directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="ACRATING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ==========================================================================
    # Required Performance Search
    # ==========================================================================

    search_lower: float = Field(
        default=SEARCH_DEFAULTS["lower"],
        description="Lower bound of the required-performance bisection",
    )
    search_upper: float = Field(
        default=SEARCH_DEFAULTS["upper"],
        description="Upper bound of the required-performance bisection",
    )
    search_iterations: int = Field(
        default=SEARCH_DEFAULTS["iterations"],
        ge=1,
        description="Number of bisection steps (fixed, no early exit)",
    )

    # ==========================================================================
    # History Cache
    # ==========================================================================

    history_cache_ttl_seconds: float = Field(
        default=0.0,
        ge=0.0,
        description="Refetch cached histories older than this (0 = never expire)",
    )

    # ==========================================================================
    # Logging Configuration
    # ==========================================================================

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    # ==========================================================================
    # Validators
    # ==========================================================================

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return upper_v

    @model_validator(mode="after")
    def validate_search_range(self) -> "Settings":
        """Bisection needs a non-empty interval."""
        if self.search_lower >= self.search_upper:
            raise ValueError(
                f"search_lower ({self.search_lower}) must be below "
                f"search_upper ({self.search_upper})"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures we only load settings once,
    which is important because loading from .env can be slow.
    """
    return Settings()


# Convenience alias for importing
settings = get_settings()
