"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() so the settings are only loaded once per process.

Usage:
    from backend.settings import get_settings, Settings

    settings = get_settings()
    print(settings.preferred_load_unit)

    # Tests: build an isolated instance that ignores .env
    settings = Settings(_env_file=None, preferred_load_unit="kg")
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.models.load import LoadUnit


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production",
    )

    # -------------------------------------------------------------------------
    # Analysis Defaults
    # -------------------------------------------------------------------------
    preferred_load_unit: LoadUnit = Field(
        default=LoadUnit.LBS,
        description="Unit used for volume numbers when the caller does not pass one",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    @field_validator("preferred_load_unit", mode="before")
    @classmethod
    def normalize_load_unit(cls, v):
        """Accept 'LBS', ' kg ' and 'lb' spellings."""
        if isinstance(v, str):
            v = v.strip().lower()
            if v == "lb":
                return LoadUnit.LBS
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()
