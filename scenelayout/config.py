"""
config.py — Layout engine configuration.

Uses pydantic-settings so every option can be overridden from the
environment (prefix ``SCENELAYOUT_``) or a local ``.env`` file.
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LayoutSettings(BaseSettings):
    """Layout engine settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SCENELAYOUT_",
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Grid dimension parsing
    default_star_weight: float = Field(default=1.0, gt=0)  # Weight of a bare "*"
    invalid_dimension_policy: Literal["reject", "zero"] = "reject"


@lru_cache()
def get_settings() -> LayoutSettings:
    """Get cached settings instance."""
    return LayoutSettings()


def configure_logging(settings: LayoutSettings | None = None) -> None:
    """Configure the root logger from settings."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format=settings.log_format,
    )
