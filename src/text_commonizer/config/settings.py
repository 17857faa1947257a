"""
Configuration management for text_commonizer.

Settings are loaded from environment variables (prefix ``TXC_``) and an
optional ``.env`` file using Pydantic BaseSettings. The rule catalog itself
is fixed; configuration only covers the ambient concerns around it:
logging, the iteration guard of recursive rules and the location of the
named profile file.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_OVERRIDE = os.getenv("TXC_ENV_FILE")
SETTINGS_ENV_FILE = Path(ENV_FILE_OVERRIDE).expanduser() if ENV_FILE_OVERRIDE else Path(".env")

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are read with the TXC_ prefix, e.g.
    TXC_RECURSION_LIMIT overrides ``recursion_limit``. LOG_LEVEL is read
    without prefix so it can be shared with the host application.
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )
    log_to_file: bool = Field(
        default=False, description="Also write logs to a daily rotating file"
    )
    log_file_dir: str = Field(
        default="logs", description="Directory for rotating log files"
    )
    log_text_preview_chars: int = Field(
        default=80,
        ge=0,
        description="Longest string value rendered in log events (0 = unlimited)",
    )

    recursion_limit: int = Field(
        default=10_000,
        gt=0,
        description="Maximum passes of a recursive rule before giving up",
    )

    profiles_config: Optional[str] = Field(
        default=None,
        description="Path to a YAML file with named rule profiles (None = bundled file)",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = (value or "INFO").upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got: {value!r}"
            )
        return level

    model_config = SettingsConfigDict(
        env_prefix="TXC_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Call ``get_settings.cache_clear()`` after changing the environment to
    pick up new values.
    """
    return Settings()
