"""Configuration settings for Vectorpath."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """Standard logging level names."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ReaderConfig(BaseModel):
    """Configuration for reading glyph outlines from fonts."""

    normalize_winding: bool = Field(
        default=True,
        description="Reverse CFF contours so they follow the TrueType winding convention",
    )
    skip_empty: bool = Field(
        default=True,
        description="Skip glyphs without contours",
    )


class OutputConfig(BaseModel):
    """Configuration for console reports."""

    precision: int = Field(
        default=1,
        ge=0,
        le=6,
        description="Decimal places for printed coordinates",
    )
    show_reversed: bool = Field(
        default=False,
        description="Also report the direction of each reversed contour",
    )
    max_rows: int = Field(
        default=500,
        ge=1,
        description="Maximum number of contour rows printed",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default=LogLevel.DEBUG,
        description="File log level (more verbose)",
    )


class VectorPathSettings(BaseModel):
    """Main application settings."""

    reader: ReaderConfig = Field(default_factory=ReaderConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> VectorPathSettings:
    """Get default application settings."""
    return VectorPathSettings()
