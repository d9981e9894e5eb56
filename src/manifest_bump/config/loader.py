"""Configuration loading and validation."""

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import (
    DEFAULT_COMMIT_MESSAGE,
    DEFAULT_GIT_EXECUTABLE,
    DEFAULT_MANIFEST_FILE,
    DEFAULT_TAG_PREFIX,
)
from ..core.exceptions import ConfigurationError

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MANIFEST_BUMP_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    debug: bool = False

    # Manifest
    manifest_file: str = DEFAULT_MANIFEST_FILE

    # Git
    git_executable: str = DEFAULT_GIT_EXECUTABLE
    tag_prefix: str = DEFAULT_TAG_PREFIX
    commit_message_template: str = DEFAULT_COMMIT_MESSAGE
    sign_commits: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("commit_message_template")
    @classmethod
    def validate_commit_message_template(cls, v: str) -> str:
        """The template may only reference {tag} and {version}."""
        try:
            v.format(tag="v0.0.0", version="0.0.0")
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(f"Invalid commit message template: {e}") from e
        return v

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level

    def tag_for(self, version: object) -> str:
        """Git tag name for a version, e.g. ``v1.2.3``."""
        return f"{self.tag_prefix}{version}"

    def commit_message_for(self, version: object) -> str:
        return self.commit_message_template.format(tag=self.tag_for(version), version=version)


def load_settings(**overrides: object) -> Settings:
    """Build settings, turning validation failures into ConfigurationError."""
    try:
        return Settings(**overrides)  # type: ignore[arg-type]
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}", cause=e) from e
