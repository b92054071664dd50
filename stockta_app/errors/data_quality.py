"""
Data quality error classifications for price history processing.

These exceptions categorize the data quality issues that can occur while
daily price rows are parsed and handed to the indicator engine.
"""

from datetime import date
from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class TemporalDataError(DataQualityError):
    """Ordering or duplicate-day issues in a price series."""

    def __init__(self, message: str, day: Optional[date] = None,
                 previous_day: Optional[date] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.day = day
        self.previous_day = previous_day
        # Unsorted input reaching the calculator is a caller bug
        self.recoverable = False


class MissingDataError(DataQualityError):
    """Required data is completely missing."""

    def __init__(self, message: str, data_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.data_type = data_type


class MalformedDataError(DataQualityError):
    """Data exists but is in incorrect format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format


class InsufficientDataError(DataQualityError):
    """Not enough price history for a full analysis."""

    def __init__(self, message: str, required_count: Optional[int] = None,
                 available_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_count = required_count
        self.available_count = available_count
