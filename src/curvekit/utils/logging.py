"""Logging utilities for curvekit."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from curvekit.config import LoggingConfig


@dataclass
class ConversionStats:
    """Statistics from a batch outline conversion."""

    converted_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    segment_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Library modules log through the standard ``logging`` module; this wires
    handlers onto the ``curvekit`` logger and sets up structlog on top.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    package_logger = logging.getLogger("curvekit")
    package_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        package_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("curvekit")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


def configure_logging_from_config(
    config: LoggingConfig,
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure logging from a LoggingConfig, e.g. ``settings.logging``.

    Args:
        config: Logging settings (file path and levels)
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    return configure_logging(
        log_file=config.log_file,
        console_level=config.log_level,
        file_level=config.file_log_level,
        quiet=quiet,
    )


class ConversionLogger:
    """Logger for tracking glyph-to-curve conversions and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ConversionStats()

    def log_glyph_converted(self, glyph_name: str, contours: int, segments: int) -> None:
        """Log successful glyph conversion."""
        self._logger.debug(
            "Glyph converted",
            glyph=glyph_name,
            contours=contours,
            segments=segments,
        )
        self._stats.converted_count += 1
        self._stats.segment_count += segments

    def log_glyph_skipped(self, glyph_name: str, reason: str) -> None:
        """Log skipped glyph."""
        self._logger.debug("Glyph skipped", glyph=glyph_name, reason=reason)
        self._stats.skipped_count += 1

    def log_glyph_error(self, glyph_name: str, error: Exception) -> None:
        """Log glyph conversion error."""
        self._logger.error(
            "Glyph conversion failed",
            glyph=glyph_name,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((glyph_name, str(error)))

    @property
    def stats(self) -> ConversionStats:
        """Get current conversion statistics."""
        return self._stats
