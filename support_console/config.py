"""Process settings loaded from the environment using pydantic-settings."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from support_console.models.console import ConsoleConfig


class Settings(BaseSettings):
    """Console settings, read from SUPPORT_CONSOLE_* variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="SUPPORT_CONSOLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Engine
    reply_delay_seconds: float = Field(default=0.9, ge=0, description="Delay before a composed reply lands")
    max_related_articles: int = Field(default=2, ge=0, description="Articles listed after the best match")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_json: bool = Field(default=False, description="Render logs as JSON")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    def to_console_config(self) -> ConsoleConfig:
        """Build the engine configuration from these settings."""
        return ConsoleConfig(
            reply_delay_seconds=self.reply_delay_seconds,
            max_related_articles=self.max_related_articles,
        )
