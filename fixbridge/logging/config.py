"""
Centralized logging configuration for the bridge translation layer.

This module provides standardized logging configuration using structlog
for all components. Symbology lookups and order ingestion both log through
this configuration so that failed translations carry consistent context.
"""
import logging
import sys
from typing import Optional

import structlog
from structlog.types import FilteringBoundLogger, Processor

from ..errors import ConfigurationError


def build_processors(include_timestamp: bool = True, include_caller: bool = False) -> list[Processor]:
    """
    Build the processor chain shared by console and JSON output.

    The renderer is not included; configure_logging appends it last.
    """
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    return processors


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the bridge process.

    Calling this again replaces the previous configuration, including the
    stdout handler on the root logger.

    Args:
        level: Logging level name, case-insensitive
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors, run before rendering

    Raises:
        ConfigurationError: If level is not a standard logging level name
    """
    log_level = logging.getLevelNamesMapping().get(str(level).upper())
    if log_level is None:
        raise ConfigurationError(f"Unknown log level: {level!r}")

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s",  # structlog will handle formatting
        force=True,
    )

    processors = build_processors(include_timestamp, include_caller)

    if extra_processors:
        processors.extend(extra_processors)

    # Renderer must come last
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_symbology_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the symbology subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for symbol translation
    """
    return get_logger(name).bind(subsystem="symbology")


def log_translation_miss(
    logger: FilteringBoundLogger,
    direction: str,
    symbol: str,
    counterparty: str,
    reason: str,
) -> None:
    """
    Log a failed symbol translation with standardized format.

    Args:
        logger: Structlog logger instance
        direction: "to_exchange" or "to_counterparty"
        symbol: Symbol that was looked up
        counterparty: Counterparty the lookup was scoped to
        reason: Why no mapping was produced
    """
    logger.warning(
        "Symbol translation failed",
        direction=direction,
        symbol=symbol,
        counterparty=counterparty,
        reason=reason,
    )
