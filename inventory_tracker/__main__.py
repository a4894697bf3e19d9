"""CLI entry point for the inventory tracker.

Usage:
    # Start the interactive menu
    python -m inventory_tracker shell
    python -m inventory_tracker shell --log-level DEBUG
    INVENTORY_REPORT_DIR=/tmp/reports python -m inventory_tracker shell

    # Show the effective settings
    python -m inventory_tracker settings
"""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger("inventory.cli")


def _cmd_shell(args: argparse.Namespace) -> None:
    """Run the interactive console."""
    from .config import get_settings
    from .console import ConsoleApp
    from .controller import InventoryController
    from .logging_setup import configure_logging

    settings = get_settings()
    configure_logging(settings, level=args.log_level)
    logger.info("Starting inventory shell (reports in %s)", settings.report_dir)

    ConsoleApp(InventoryController(settings=settings)).run()


def _cmd_settings(args: argparse.Namespace) -> None:
    """Print the settings resolved from the environment."""
    from .config import get_settings

    for key, value in get_settings().model_dump().items():
        print(f"{key:<16} {value}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="inventory_tracker",
        description="In-memory inventory and sales tracker",
    )
    sub = parser.add_subparsers(dest="command")

    shell = sub.add_parser("shell", help="Start the interactive menu")
    shell.add_argument(
        "--log-level",
        default=None,
        help="Override INVENTORY_LOG_LEVEL (DEBUG, INFO, WARNING, ...)",
    )
    shell.set_defaults(func=_cmd_shell)

    settings = sub.add_parser("settings", help="Show effective settings")
    settings.set_defaults(func=_cmd_settings)

    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    args.func(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
