"""Shared pytest fixtures for the inventory tracker tests."""

import logging
from datetime import date

import pytest
from inventory_tracker.config import InventorySettings, get_settings
from inventory_tracker.controller import InventoryController
from inventory_tracker.logging_setup import LOGGER_NAME

REPORT_DATE = date(2026, 1, 31)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings(tmp_path) -> InventorySettings:
    return InventorySettings(report_dir=tmp_path / "reports", store_name="Test Store")


@pytest.fixture
def controller(settings) -> InventoryController:
    """Fresh controller per test with a pinned report date."""
    return InventoryController(settings=settings, today=lambda: REPORT_DATE)


@pytest.fixture
def clean_logger():
    """Detach handlers added by configure_logging once the test is done."""
    logger = logging.getLogger(LOGGER_NAME)
    saved_handlers, saved_level = logger.handlers[:], logger.level
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
