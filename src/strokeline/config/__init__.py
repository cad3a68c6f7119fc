"""Configuration management for strokeline.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SimplifierConfig: Corridor tolerance
- StreamConfig: Chunking used when replaying recorded traces
- LoggingConfig: Logging settings
- StrokelineSettings: Main application settings
"""

from strokeline.config.settings import (
    DEFAULT_TOLERANCE,
    LoggingConfig,
    SimplifierConfig,
    StreamConfig,
    StrokelineSettings,
    get_default_settings,
)

__all__ = [
    "DEFAULT_TOLERANCE",
    "LoggingConfig",
    "SimplifierConfig",
    "StreamConfig",
    "StrokelineSettings",
    "get_default_settings",
]
