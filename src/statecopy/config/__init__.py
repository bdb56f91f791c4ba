"""Configuration module using Pydantic Settings.

Usage:
    from statecopy.config import DemoSettings

    settings = DemoSettings(report_format="json")
"""

from statecopy.config.settings import DemoSettings, LogLevel, ReportFormat

__all__ = [
    "LogLevel",
    "DemoSettings",
    "ReportFormat",
]
