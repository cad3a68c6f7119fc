"""Utility functions for strokeline.

This module provides utility functions including:

- Logging setup and configuration
- Per-stroke statistics tracking
"""

from strokeline.utils.logging import (
    StrokeLogger,
    StrokeStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "StrokeLogger",
    "StrokeStats",
    "configure_logging",
    "get_logger",
]
