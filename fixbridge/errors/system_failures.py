"""
System failure error classifications for unrecoverable errors.

These exceptions are raised while the bridge is being assembled. No partially
constructed component is ever handed out when one of them is raised.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class SymbologyLoadError(SystemFailureError):
    """Symbology mapping file could not be opened or read."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path


class ConfigurationError(SystemFailureError):
    """Bridge settings failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
