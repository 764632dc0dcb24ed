"""
Library configuration using Pydantic Settings.

Loads configuration from environment variables (prefix ``DUALCONTRACT_``)
and an optional .env file.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="DUALCONTRACT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="dualcontract", description="Library name stamped on every log event")
    app_env: str = Field(default="development", description="Environment (development/production)")
    debug: bool = Field(default=False, description="Force DEBUG logging regardless of log_level")
    log_level: str = Field(default="INFO", description="Logging level")

    # Example generation
    example_seed: int = Field(
        default=0,
        description="Base seed for deterministic pattern example generation",
    )

    # Body matchers
    body_matcher_conflict_policy: Literal["most_specific", "last_declared", "strict"] = Field(
        default="most_specific",
        description="How conflicting body matchers on the same path are resolved",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Reject log levels the logging module does not know."""
        normalized = value.upper()
        if normalized not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Invalid log level '{value}'")
        return normalized

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env.lower() == "production"


# Global settings instance
settings = Settings()
