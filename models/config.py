"""Application configuration using Pydantic v2.

Centralized settings for kitsu-manga:
- Kitsu API endpoint and network deadline
- Optional log file

Configuration can be overridden via environment variables:
    KITSU_MANGA__KITSU__API_URL=https://kitsu.io/api/edge
    KITSU_MANGA__KITSU__TIMEOUT_SECONDS=5
    KITSU_MANGA__LOG__FILE=/tmp/kitsumanga.log
"""

from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.exceptions import ConfigError


class KitsuSettings(BaseModel):
    """Kitsu API configuration."""

    api_url: str = Field(
        "https://kitsu.io/api/edge",
        description="Kitsu JSON:API base URL",
    )
    timeout_seconds: float = Field(
        10.0,
        gt=0,
        le=120,
        description="Deadline for the single HTTP request (seconds)",
    )

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Validate URL scheme and drop a trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"API URL must be http(s), got: {v}")
        return v.rstrip("/")


class LogSettings(BaseModel):
    """Logging configuration."""

    file: Path | None = Field(
        None,
        description="Optional log file; console-only logging when unset",
    )


class AppSettings(BaseSettings):
    """Root application settings with environment variable support.

    Environment variables use the prefix KITSU_MANGA__ with nested delimiters:
    - KITSU_MANGA__KITSU__TIMEOUT_SECONDS=5
    - KITSU_MANGA__LOG__FILE=/tmp/kitsumanga.log

    Can also be configured via .env file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",  # KITSU_MANGA__KITSU__API_URL
        env_prefix="KITSU_MANGA__",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )

    kitsu: KitsuSettings = Field(default_factory=KitsuSettings)
    log: LogSettings = Field(default_factory=LogSettings)


def load_settings() -> AppSettings:
    """Build settings from the environment.

    Raises:
        ConfigError: If an environment override fails validation
    """
    try:
        return AppSettings()
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(f"invalid configuration: {problems}") from e


# Singleton instance - import and use throughout the app
settings = load_settings()
