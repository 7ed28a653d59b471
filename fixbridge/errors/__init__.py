"""
Error classification for the translation layer.

Data quality errors cover bad input records that fail a single conversion.
System failures cover problems that prevent the bridge from starting.
"""

from .data_quality import (
    DataQualityError,
    MissingDataError,
    MalformedDataError,
)
from .system_failures import (
    SystemFailureError,
    SymbologyLoadError,
    ConfigurationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "SymbologyLoadError",
    "ConfigurationError",
]
