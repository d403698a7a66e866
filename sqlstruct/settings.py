"""
Runtime settings loaded from environment variables.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings from SQLSTRUCT_* environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="SQLSTRUCT_",
        env_file=".env",
        extra="ignore",
    )

    # Directory holding sqlstruct.yaml
    config_dir: Optional[Path] = None

    log_level: str = "WARNING"

    @property
    def log_level_value(self) -> int:
        """Numeric logging level; unknown names fall back to WARNING."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
