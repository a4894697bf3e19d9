"""Logging setup for the inventory.* logger hierarchy."""

from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler

from .config import InventorySettings

LOGGER_NAME = "inventory"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    settings: InventorySettings,
    level: str | None = None,
) -> logging.Logger:
    """Attach console (and optional file) handlers to the ``inventory`` logger.

    Safe to call more than once; handlers are only added the first time.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or settings.log_level).upper())

    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            filename=settings.log_file,
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
