"""Settings loaded from environment variables.

EnvironmentVariables holds the few primitive values that decide how the
rest of the configuration is found and how verbose the run is.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.utils.paths import get_project_root


class EnvironmentVariables(BaseSettings):
    """Simple primitive values loaded from environment variables and .env files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = Field(
        default="development", validation_alias="APP_ENVIRONMENT"
    )
    log_level: str | None = Field(default=None, validation_alias="LOG_LEVEL")
    config_path: Path = Field(
        default=Path("config.yaml"), validation_alias="CONFIG_PATH"
    )

    @property
    def resolved_config_path(self) -> Path:
        """Config path, relative paths being taken from the project root."""
        if self.config_path.is_absolute():
            return self.config_path
        return get_project_root() / self.config_path
