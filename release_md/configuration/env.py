"""Pydantic Settings model for application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from release_md.utils.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_RELEASE_BRANCH,
    DEFAULT_RELEASE_FILE,
    DEFAULT_SERVICE_NAME,
    DEFAULT_TAG_FORMAT,
)
from release_md.utils.helpers import validate_tag_format

LogLevel = Literal["debug", "info", "warning", "error", "critical"]


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # Logging settings
    LOG_LEVEL: LogLevel = DEFAULT_LOG_LEVEL
    LOG_JSON: bool = False
    LOG_SILENT: bool = False
    LOG_FILE: Path | None = None
    SERVICE_NAME: str = DEFAULT_SERVICE_NAME

    # Release settings
    RELEASE_FILE: Path = Path(DEFAULT_RELEASE_FILE)
    RELEASE_BRANCH: str = DEFAULT_RELEASE_BRANCH
    TAG_FORMAT: str = DEFAULT_TAG_FORMAT

    @field_validator("TAG_FORMAT")
    @classmethod
    def check_tag_format(cls, value: str) -> str:
        """Ensure the tag format has exactly one {version} field."""
        return validate_tag_format(value)


def load_settings() -> Settings:
    """Build the settings from the environment and the optional .env file."""
    return Settings()
