"""Utility functions for vectorpath.

This module provides utility functions including:

- Logging setup and configuration
- Inspection statistics tracking
"""

from vectorpath.utils.logging import (
    InspectionLogger,
    InspectionStats,
    configure_logging,
)

__all__ = [
    "InspectionLogger",
    "InspectionStats",
    "configure_logging",
]
