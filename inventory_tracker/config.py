"""Inventory tracker configuration.

Loads from environment variables (prefix ``INVENTORY_``) and an optional
.env file.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class InventorySettings(BaseSettings):
    """Settings for report output and logging.

    All values can be set via environment variables or .env file,
    e.g. ``INVENTORY_REPORT_DIR=/tmp/reports``.
    """

    # ----- Reports -----
    report_dir: Path = Field(
        default=Path("reports"),
        description="Directory that PDF exports are written to.",
    )
    store_name: str = Field(
        default="Inventory",
        description="Title printed at the top of every report.",
    )
    amount_decimals: int = Field(
        default=2,
        ge=0,
        description="Decimals shown for prices and profits.",
    )

    # ----- Logging -----
    log_level: str = Field(default="INFO", description="Root level for inventory.* loggers.")
    log_file: Path | None = Field(
        default=None,
        description="Optional log file, rotated daily. Console only when unset.",
    )

    model_config = {
        "env_prefix": "INVENTORY_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> InventorySettings:
    """Get cached settings singleton."""
    return InventorySettings()
