"""Configuration management for curvekit.

This module provides configuration management using Pydantic models.

Key classes:
- GeometryConfig: Tolerances used by curve conversions
- LoggingConfig: Logging settings
- CurveKitSettings: Main library settings
"""

from curvekit.config.settings import (
    CurveKitSettings,
    GeometryConfig,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "CurveKitSettings",
    "GeometryConfig",
    "LoggingConfig",
    "get_default_settings",
]
