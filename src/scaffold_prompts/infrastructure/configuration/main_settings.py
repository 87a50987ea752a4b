import os
from enum import StrEnum
from pathlib import Path
from typing import List, Optional

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scaffold_prompts.application.core.exceptions.configuration_error import ConfigurationError
from scaffold_prompts.application.core.shared.hosting_url_service import DEFAULT_HOSTS


class LogFormat(StrEnum):
    CONSOLE = "console"
    JSON = "json"


class PromptSettings(BaseSettings):
    # Project environment
    working_dir: Path = Field(default_factory=Path.cwd, description="Directory the project is scaffolded in")
    user_name: Optional[str] = Field(default=None, description="Login name used when guessing repository owners")

    # Version control
    git_executable: str = "git"
    hosting_hosts: List[str] = Field(default_factory=lambda: list(DEFAULT_HOSTS))

    # Built-in prompt defaults
    default_description: str = "The best project ever."
    default_license: str = "MIT"

    # Logging
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE

    model_config = SettingsConfigDict(
        env_prefix="SCAFFOLD_PROMPTS_",
        env_file=None,
        extra="ignore",
    )

    @field_validator("git_executable")
    def validate_git_executable(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("git_executable cannot be empty")
        return v.strip()

    @field_validator("log_level")
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level '{v}'")
        return level

    @model_validator(mode="after")
    def default_user_from_login(self) -> "PromptSettings":
        # SCAFFOLD_PROMPTS_USER_NAME wins over the login name.
        if not self.user_name:
            self.user_name = os.getenv("USER") or os.getenv("USERNAME") or None
        return self

    @property
    def fallback_user(self) -> str:
        return self.user_name or "???"


def load_settings(**overrides) -> PromptSettings:
    """Reads settings from the environment, raising ConfigurationError when they are invalid."""
    try:
        return PromptSettings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid Configuration: {e}") from e
