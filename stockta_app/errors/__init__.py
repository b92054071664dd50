"""
Error classification system for the indicator engine.

This module provides the exception hierarchy used when price history is
normalized, configuration is merged and indicators are calculated.
"""

from .data_quality import (
    DataQualityError,
    TemporalDataError,
    MissingDataError,
    MalformedDataError,
    InsufficientDataError,
)
from .system_failures import (
    SystemFailureError,
    IndicatorCalculationError,
    ConfigurationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "TemporalDataError",
    "MissingDataError",
    "MalformedDataError",
    "InsufficientDataError",
    # System Failures
    "SystemFailureError",
    "IndicatorCalculationError",
    "ConfigurationError",
]
