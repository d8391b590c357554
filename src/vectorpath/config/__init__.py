"""Configuration management for vectorpath.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- LogLevel: Accepted logging level names
- ReaderConfig: Font outline reading settings
- OutputConfig: Console report settings
- LoggingConfig: Logging settings
- VectorPathSettings: Main application settings
"""

from vectorpath.config.settings import (
    LogLevel,
    LoggingConfig,
    OutputConfig,
    ReaderConfig,
    VectorPathSettings,
    get_default_settings,
)

__all__ = [
    "LogLevel",
    "LoggingConfig",
    "OutputConfig",
    "ReaderConfig",
    "VectorPathSettings",
    "get_default_settings",
]
