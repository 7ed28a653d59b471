"""
Data quality error classifications for exchange record ingestion.

These exceptions abort the conversion of a single record. The caller decides
whether to drop the record or reject the protocol message that carried it.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for data quality issues scoped to one record."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MissingDataError(DataQualityError):
    """Required field is absent from the record."""

    def __init__(self, message: str, data_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.data_type = data_type


class MalformedDataError(DataQualityError):
    """Field exists but is in incorrect format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None,
                 field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format
        self.field = field
