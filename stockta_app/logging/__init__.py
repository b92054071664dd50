"""
Logging configuration and utilities for the StockTA indicator engine.
"""
from .config import configure_logging, get_logger, get_indicator_logger

__all__ = ["configure_logging", "get_logger", "get_indicator_logger"]
