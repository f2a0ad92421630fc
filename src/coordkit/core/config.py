"""
Configuration settings for coordkit.
"""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Library settings with environment variable support.

    Attributes:
        mgrs_precision: Default number of MGRS easting/northing digits (0-5)
        decimal_places: Decimal places used when formatting decimal degrees
        environment: Deployment environment, drives log formatting
        log_level: Explicit log level, or None to derive from environment
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="COORDKIT_",
        extra="ignore",
    )

    # Output formatting
    mgrs_precision: int = Field(default=5, ge=0, le=5)
    decimal_places: int = Field(default=6, ge=0, le=12)

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Optional[str] = None


# Global settings instance
settings = Settings()
