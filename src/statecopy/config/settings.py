"""Configuration settings using Pydantic Settings.

Provides typed configuration for the demo with environment variable support.

Usage:
    from statecopy.config import DemoSettings

    # Load from environment variables (STATECOPY_*)
    settings = DemoSettings()

    # Or override with explicit values
    settings = DemoSettings(report_format="json", indent=2)
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ReportFormat = Literal["repr", "json"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class DemoSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the copy demonstration.

    Attributes:
        report_format: How each state is rendered (repr or json).
        indent: JSON indentation; None renders each state on one line.
        log_level: Logging level for the console entry point (case-insensitive).

    Environment Variables:
        STATECOPY_REPORT_FORMAT
        STATECOPY_INDENT
        STATECOPY_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="STATECOPY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    report_format: ReportFormat = "repr"
    indent: int | None = Field(default=None, ge=0)
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value
