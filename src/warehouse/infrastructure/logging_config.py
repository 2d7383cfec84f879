"""Logging setup for the ``warehouse`` logger hierarchy."""

from __future__ import annotations

import logging

from warehouse.infrastructure.config import WarehouseSettings

ROOT_LOGGER = "warehouse"


def configure_logging(settings: WarehouseSettings) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling it again replaces the previous handler instead of stacking one.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(settings.log_format, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    logger.setLevel(settings.log_level)
    logger.propagate = False
    return logger
