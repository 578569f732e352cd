"""
Identitet configuration management using pydantic-settings.

Only the command line reads these settings; the parsing functions take
explicit ParseOptions.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def normalize_log_level(value: str) -> str:
    """Upper-case a logging level name, raising ValueError if it is unknown."""
    level = value.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {value}")
    return level


class Settings(BaseSettings):
    """Settings loaded from IDENTITET_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="IDENTITET_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    allow_coordination_number: bool = Field(
        default=True,
        description="Accept samordningsnummer (day of month + 60)",
    )
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return normalize_log_level(v)


# Global settings instance
settings = Settings()
