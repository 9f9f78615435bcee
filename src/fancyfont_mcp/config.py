"""fancyfont-mcp settings loaded from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """FancyFont MCP server settings."""

    model_config = SettingsConfigDict(
        env_prefix="FANCYFONT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Longest input a tool will convert (characters)
    max_text_length: int = 5000

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value
