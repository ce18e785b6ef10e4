"""Configuration management for anchorstat.

Uses pydantic-settings for type-safe environment variable loading.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ANCHORSTAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment",
    )
    api_host: str = Field(
        default="127.0.0.1",
        description="API server host",
    )
    api_port: int = Field(
        default=8000,
        description="API server port",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    # Survey Domain
    reference_answer: float = Field(
        default=54,
        description="True answer to the estimation question (African UN members)",
    )
    significance_level: float = Field(
        default=0.05,
        gt=0,
        lt=1,
        description="Two-tailed p-value threshold for significance",
    )
    q1_min: int = Field(default=1, description="Smallest valid anchor answer")
    q1_max: int = Field(default=100, description="Largest valid anchor answer")
    q2_min: int = Field(default=0, description="Smallest valid estimate")
    q2_max: int = Field(default=1000, description="Largest valid estimate")

    # Synthetic Data
    default_generate_count: int = Field(
        default=30,
        description="Number of synthetic responses generated when none is given",
    )
    max_generate_count: int = Field(
        default=500,
        description="Upper bound on synthetic responses per request",
    )
    default_anchor_strength: float = Field(
        default=0.4,
        ge=0,
        le=1,
        description="Weight of the anchor in synthetic estimates",
    )


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings
