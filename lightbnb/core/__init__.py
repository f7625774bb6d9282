"""
Core utilities and configuration for LightBnB.

This package provides core functionality including logging configuration,
settings, and the database access layer.

Importing the package does not configure logging. Applications call
``setup_logging()`` once at startup; library modules only use
``logging.getLogger(__name__)``.
"""

from lightbnb.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
