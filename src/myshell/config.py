"""Configuration management for myshell."""

from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="MYSHELL_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Prompt Configuration
    prompt: str = Field(default="$ ", description="Prompt printed before each line")
    history_file: Optional[Path] = Field(None, description="File used to persist line history")

    # Parsing Configuration
    quote_aware_redirection: bool = Field(
        default=False, description="Ignore redirection operators that appear inside quotes"
    )
    strict_quotes: bool = Field(default=False, description="Reject lines that end inside a quote")

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")


def get_settings(**overrides: object) -> Settings:
    """Get application settings.

    Args:
        overrides: Values that take precedence over the environment

    Returns:
        Settings instance
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return Settings(**values)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc
