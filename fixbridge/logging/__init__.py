"""
Logging configuration and utilities for the bridge translation layer.
"""
from .config import (
    build_processors,
    configure_logging,
    get_logger,
    get_symbology_logger,
    log_translation_miss,
)

__all__ = ["build_processors", "configure_logging", "get_logger", "get_symbology_logger", "log_translation_miss"]
