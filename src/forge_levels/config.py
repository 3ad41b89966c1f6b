"""Application configuration using pydantic-settings."""

import functools
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .engine.thresholds import DEFAULT_THRESHOLDS, ThresholdTable, load_thresholds
from .models.patterns import UnitPreference


class Settings(BaseSettings):
    """Settings loaded from ``FORGE_LEVELS_*`` environment variables and .env."""

    model_config = SettingsConfigDict(
        env_prefix="FORGE_LEVELS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Optional YAML file overriding the default threshold table
    thresholds_file: Path | None = Field(default=None)

    # Logging
    log_level: str = Field(default="WARNING")
    json_logs: bool = Field(default=False)

    # Unit assumed when a command does not pass --unit
    default_unit: UnitPreference = Field(default=UnitPreference.IMPERIAL)

    def thresholds(self, override_file: Path | None = None) -> ThresholdTable:
        """Resolve the threshold table snapshot to classify against."""
        path = override_file or self.thresholds_file
        if path is None:
            return DEFAULT_THRESHOLDS
        return load_thresholds(path)


@functools.lru_cache
def get_settings() -> Settings:
    """Get application settings singleton."""
    return Settings()
