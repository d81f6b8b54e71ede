"""Logger setup for the gas station service."""

from __future__ import annotations

import logging

LOGGER_NAME = "gasstation"


def configure_logging(level: str = "INFO", name: str = LOGGER_NAME) -> logging.Logger:
    """Return the package logger with one stream handler, never duplicated."""
    logger = logging.getLogger(name)
    if not getattr(logger, "_gasstation_configured", False):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
        setattr(logger, "_gasstation_configured", True)

    logger.setLevel(level.upper())
    return logger
