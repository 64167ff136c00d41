"""Configuration management for lsh."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lsh.errors import ConfigurationError

DEFAULT_PROMPT = "> "

LogProfile = Literal["default", "rich"]


class Settings(BaseSettings):
    """Interpreter settings."""

    model_config = SettingsConfigDict(
        env_prefix="LSH_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    prompt: str = Field(default=DEFAULT_PROMPT, description="Prompt printed before each read")
    exit_on_eof: bool = Field(default=True, description="End the command loop on end-of-input")

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")
    log_profile: LogProfile = Field(default="default", description="Log sink profile")

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not level:
            raise ValueError("log level must not be empty")
        return level


def get_settings(**overrides: Any) -> Settings:
    """Get interpreter settings.

    Args:
        **overrides: Explicit values (e.g. from CLI options). ``None`` values are ignored.

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If the environment or overrides are invalid.
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return Settings(**values)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc
