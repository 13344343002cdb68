"""
Logging for the commit checker.

Every module logs through a child of the ``github_commit_checker`` logger;
``configure_logging`` attaches the single stdout handler to that parent once
the application settings are known.
"""

import logging
import sys

from ..config import DEFAULT_LOG_FORMAT

PACKAGE_LOGGER = "github_commit_checker"


def configure_logging(level: str = "INFO", format_string: str = DEFAULT_LOG_FORMAT) -> logging.Logger:
    """
    Configure the package logger

    Calling it again replaces the handler, so the application factory can be
    invoked several times (tests do) without duplicated output.

    Args:
        level: Log level name, unknown names fall back to INFO
        format_string: Log format string

    Returns:
        The package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string))
    package_logger.addHandler(handler)

    # Keep records away from the root logger uvicorn configures
    package_logger.propagate = False

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the package logger."""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
