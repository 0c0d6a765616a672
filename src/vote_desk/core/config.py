"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables following 12-factor principles.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Store behaviour
    seed_demo_data: bool = Field(
        default=True,
        description="Load the demo election, admin and voters when a store is created",
    )
    strict_mode: bool = Field(
        default=False,
        description="Raise typed errors and enforce input validation instead of silent no-ops",
    )

    # Export
    export_dir: str = Field(
        default="./exports",
        description="Directory for exported election reports",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if v.upper() not in _LOG_LEVELS:
            msg = f"Invalid log_level: {v}"
            raise ValueError(msg)
        return v.upper()

    # Environment
    environment: str = Field(
        default="development",
        description="Deployment environment name (e.g. production, dev, staging)",
    )


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
