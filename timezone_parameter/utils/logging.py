"""Logging setup shared by the library and the web adapter."""
from __future__ import annotations

import logging

LOGGER_NAME = "timezone_parameter"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(name: str = LOGGER_NAME, level: str | int | None = None) -> logging.Logger:
    """Configure logging for the application if it is not already configured."""

    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    if level is None:
        from timezone_parameter.config.settings import get_settings

        level = get_settings().log_level

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level if isinstance(level, int) else getattr(logging, str(level).upper(), logging.INFO))

    # Avoid duplicate logging from child loggers
    logger.propagate = False
    return logger


def get_logger(suffix: str) -> logging.Logger:
    """Return a child of the package logger, e.g. ``timezone_parameter.catalog``."""
    return logging.getLogger(f"{LOGGER_NAME}.{suffix}")
