"""Configuration settings for curvekit."""

from pathlib import Path

from pydantic import BaseModel, Field


class GeometryConfig(BaseModel):
    """Configuration for curve comparisons."""

    colocation_tolerance: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="Distance under which a handle counts as colocated with its point (0 = exact)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class CurveKitSettings(BaseModel):
    """Main library settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> CurveKitSettings:
    """Get default library settings."""
    return CurveKitSettings()
