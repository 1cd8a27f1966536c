"""Utility functions for curvekit.

This module provides logging setup and conversion statistics tracking.
"""

from curvekit.utils.logging import (
    ConversionLogger,
    ConversionStats,
    configure_logging,
    configure_logging_from_config,
)

__all__ = [
    "ConversionLogger",
    "ConversionStats",
    "configure_logging",
    "configure_logging_from_config",
]
