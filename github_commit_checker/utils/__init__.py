"""
Utility functions and helpers
"""

from .logging import PACKAGE_LOGGER, configure_logging, get_logger

__all__ = [
    "PACKAGE_LOGGER",
    "configure_logging",
    "get_logger",
]
