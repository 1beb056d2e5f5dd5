"""
Environment configuration for the recognizer and its command-line driver.

Settings are read from INFIX_* environment variables, optionally through a
local `.env` file, and validated at load time.
"""

import logging
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..lexer.tokens import DEFAULT_DELIMITER
from ..parser.recognizer import DEFAULT_MAX_NESTING_DEPTH, MAX_NESTING_DEPTH_LIMIT


class Settings(BaseSettings):
    """Recognizer settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    log_level: str = Field(default="WARNING", alias="INFIX_LOG_LEVEL")
    delimiter: str = Field(default=DEFAULT_DELIMITER, alias="INFIX_DELIMITER", min_length=1)
    max_nesting_depth: int = Field(
        default=DEFAULT_MAX_NESTING_DEPTH,
        alias="INFIX_MAX_NESTING_DEPTH",
        ge=1,
        le=MAX_NESTING_DEPTH_LIMIT,
    )
    chain_operators: bool = Field(default=False, alias="INFIX_CHAIN_OPERATORS")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept only standard logging level names, normalized to upper case."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_settings(**overrides) -> Settings:
    """
    Load and validate settings from the environment.

    Args:
        overrides: Field values taking precedence over the environment

    Raises:
        RuntimeError: If the configuration is invalid
    """
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc


def settings_summary(settings: Optional[Settings] = None) -> str:
    """One-line description of the effective settings, for debug logs."""
    settings = settings or load_settings()
    return (
        f"delimiter={settings.delimiter!r} "
        f"max_nesting_depth={settings.max_nesting_depth} "
        f"chain_operators={settings.chain_operators} "
        f"log_level={settings.log_level}"
    )
